"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns and rolled back if it
raises, so each request is one transaction. ``get_db`` is the generator
from ``buildlog.shared.db`` itself (not a wrapper) so the handler's
exception is thrown into it and reaches the rollback branch.

Usage:
======
    from buildlog.api.dependencies.database import DbSession

    @router.get("/projects")
    async def list_projects(db: DbSession):
        return await ProjectRepository(db).list_for_user(user_id)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]

__all__ = ["get_db", "DbSession"]
