"""
Base Repository

Generic CRUD shared by every repository. Entity repositories add their
owner-scoped queries on top.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- count()        → Count records matching column filters
- create()       → Insert a new record
- apply()        → Write changes to an already-loaded record (None clears a column)
- delete(id)     → Hard delete a record

Generic Type Pattern:
=====================
    class ProjectRepository(BaseRepository[Project]):
        pass

    repo = ProjectRepository(db)
    project = await repo.get(id)  # Returns Project, not Any!

Write Flow:
===========
┌─────────────────────────────────────────────────────────────────────────────┐
│                          WRITE OPERATIONS                                   │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   CREATE:                                                                   │
│   ┌─────────────────────────────────────────────────────────────┐           │
│   │ instance = Model(**kwargs)   # Python object                │           │
│   │ session.add(instance)        # Pending, not in DB yet       │           │
│   │ await session.flush()        # INSERT inside the request tx │           │
│   │ await session.refresh()      # Load id and defaults         │           │
│   └─────────────────────────────────────────────────────────────┘           │
│                                                                             │
│   APPLY:                                                                    │
│   ┌─────────────────────────────────────────────────────────────┐           │
│   │ setattr(instance, field, value)  # Loaded by a service      │           │
│   │ await session.flush()            # UPDATE                   │           │
│   └─────────────────────────────────────────────────────────────┘           │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Repository methods only flush. get_db() commits after the handler
returns, so everything a request writes commits (or rolls back) together.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from buildlog.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional column filters.

        SQL Generated:
            SELECT COUNT(*) FROM check_ins WHERE user_id = '...'
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    async def apply(self, instance: ModelType, changes: dict[str, Any]) -> ModelType:
        """
        Apply changes to an already-loaded record.

        None values are written, so optional columns can be cleared.
        Keys that are not attributes of the model are ignored.

        Returns:
            The same instance, flushed and refreshed
        """
        for field, value in changes.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
