"""
ProjectUpdate Repository

Project updates are only reachable through their owning check-in, so
lookups take the check-in id alongside the update id.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.models.project_update import ProjectUpdate
from buildlog.shared.repositories.base import BaseRepository


class ProjectUpdateRepository(BaseRepository[ProjectUpdate]):
    """Repository for ProjectUpdate database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ProjectUpdate, session)

    async def get_for_check_in(self, update_id: UUID, check_in_id: UUID) -> Optional[ProjectUpdate]:
        """Get an update only if it belongs to ``check_in_id``."""
        result = await self.session.execute(
            select(ProjectUpdate).where(
                ProjectUpdate.id == update_id,
                ProjectUpdate.check_in_id == check_in_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_many(self, rows: list[dict]) -> list[ProjectUpdate]:
        """Bulk-insert updates for one check-in in a single flush."""
        instances = [ProjectUpdate(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        return instances
