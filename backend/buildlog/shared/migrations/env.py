# pylint: skip-file
# ruff: noqa
"""
Alembic environment for the Buildlog schema.

Run from ``backend/`` (alembic.ini lives there):

    alembic upgrade head                 # apply against DATABASE_URL
    alembic upgrade head --sql           # print the SQL instead (offline)
    alembic revision --autogenerate -m "add x"

The URL always comes from settings, so migrations hit the same database
as the API. Production runs on PostgreSQL through asyncpg. SQLite URLs
(local experiments) migrate in batch mode, since SQLite cannot ALTER
most column properties in place.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from buildlog.config.settings import settings

# Importing the package registers users, projects, check_ins,
# project_updates, uploads and user_settings on Base.metadata
from buildlog.shared.models import Base

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Open an async engine (no pooling) and run the migrations on it."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
