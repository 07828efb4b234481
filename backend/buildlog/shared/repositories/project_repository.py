"""
Project Repository

Database operations for the Project model. Every query is scoped to the
owning user; a project belonging to someone else is indistinguishable
from one that does not exist.

Common Operations:
==================
- list_for_user()      → User's projects, newest first
- get_for_user()       → One project, ownership enforced
- names_by_id()        → {project_id: name} for rendering updates
- count_by_status()    → {status: count} for the dashboard
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.models.enums import ProjectStatus
from buildlog.shared.models.project import Project
from buildlog.shared.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Project, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_for_user(
        self,
        user_id: UUID,
        status: Optional[ProjectStatus] = None,
    ) -> list[Project]:
        """
        List a user's projects ordered by creation time, newest first.

        Args:
            user_id: Owner
            status: Optional status filter (the check-in form only offers active ones)

        SQL Generated:
            SELECT * FROM projects WHERE user_id = '...'
            ORDER BY created_at DESC
        """
        stmt = select(Project).where(Project.user_id == user_id)
        if status is not None:
            stmt = stmt.where(Project.status == status)
        stmt = stmt.order_by(Project.created_at.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_user(self, project_id: UUID, user_id: UUID) -> Optional[Project]:
        """Get a project only if it belongs to ``user_id``."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def names_by_id(self, project_ids: list[UUID], user_id: UUID) -> dict[UUID, str]:
        """
        Resolve the user's project names for a set of ids.

        Ids of deleted projects are simply absent from the result.
        """
        if not project_ids:
            return {}

        result = await self.session.execute(
            select(Project.id, Project.name).where(
                Project.id.in_(list(set(project_ids))),
                Project.user_id == user_id,
            )
        )
        return {project_id: name for project_id, name in result.all()}

    # ═══════════════════════════════════════════════════════════════════════════
    # AGGREGATES
    # ═══════════════════════════════════════════════════════════════════════════

    async def count_by_status(self, user_id: UUID) -> dict[ProjectStatus, int]:
        """
        Count a user's projects grouped by status.

        Statuses with no projects are reported as 0.

        SQL Generated:
            SELECT status, COUNT(*) FROM projects
            WHERE user_id = '...' GROUP BY status
        """
        result = await self.session.execute(
            select(Project.status, func.count())
            .where(Project.user_id == user_id)
            .group_by(Project.status)
        )
        counts = {status: 0 for status in ProjectStatus}
        for status, total in result.all():
            counts[ProjectStatus(status)] = total
        return counts
