"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in
Buildlog: the declarative base, the timestamp mixin, and the column types
shared by every table.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Column Types:
=============
    UUIDType      ← native UUID on PostgreSQL, CHAR(32) elsewhere
    StringList    ← JSONB list of strings on PostgreSQL, JSON elsewhere

Usage:
======
    from buildlog.shared.models.base import Base, TimestampMixin, UUIDType

    class Project(Base, TimestampMixin):
        __tablename__ = "projects"
        id: Mapped[uuid.UUID] = mapped_column(UUIDType, primary_key=True, default=uuid.uuid4)
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Uuid, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Portable UUID column (stored natively by PostgreSQL)
UUIDType = Uuid(as_uuid=True)

# List-of-strings column (technologies, audience interests)
StringList = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or together with TimestampMixin.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns that are automatically managed:
    - created_at: Set on INSERT (microsecond precision, database default as fallback)
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on UPDATE

    Example values:
        created_at: 2024-01-15T10:30:00Z (when record was created)
        updated_at: 2024-01-16T14:45:30Z (last modification time)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
