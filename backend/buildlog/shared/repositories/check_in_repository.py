"""
CheckIn Repository

Database operations for check-ins and their child rows.

Common Operations:
==================
- list_recent_for_user()     → Latest N check-ins with children, newest first
- get_for_user()             → One check-in with children, ownership enforced
- activity_dates()           → Dates with at least one check-in (for streaks)
- delete_with_children()     → Uploads, then updates, then the check-in row

Loading Strategy:
=================
CheckIn.project_updates and CheckIn.uploads are ``selectin`` relationships,
so a list query issues exactly three statements regardless of N:

    SELECT * FROM check_ins WHERE user_id = ... ORDER BY created_at DESC LIMIT 50
    SELECT * FROM project_updates WHERE check_in_id IN (...)
    SELECT * FROM uploads WHERE check_in_id IN (...)
"""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.models.check_in import CheckIn
from buildlog.shared.models.project_update import ProjectUpdate
from buildlog.shared.models.upload import Upload
from buildlog.shared.repositories.base import BaseRepository


class CheckInRepository(BaseRepository[CheckIn]):
    """Repository for CheckIn database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(CheckIn, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_recent_for_user(self, user_id: UUID, limit: int = 50) -> list[CheckIn]:
        """
        Get a user's latest check-ins with updates and uploads loaded.

        Args:
            user_id: Owner
            limit: Maximum number of check-ins (history shows 50)

        Returns:
            Check-ins ordered by created_at, newest first
        """
        result = await self.session.execute(
            select(CheckIn)
            .where(CheckIn.user_id == user_id)
            .order_by(CheckIn.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_for_user(self, check_in_id: UUID, user_id: UUID) -> Optional[CheckIn]:
        """
        Get one check-in with its children, only if owned by ``user_id``.

        ``populate_existing`` reloads the children even when the check-in is
        already in the session identity map, so rows inserted or removed
        earlier in the same request are reflected.
        """
        result = await self.session.execute(
            select(CheckIn)
            .where(CheckIn.id == check_in_id, CheckIn.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def activity_dates(self, user_id: UUID) -> set[date]:
        """
        Collect the calendar dates on which the user checked in.

        Falls back to the created_at date for rows without ``check_in_date``.
        """
        result = await self.session.execute(
            select(CheckIn.check_in_date, CheckIn.created_at).where(CheckIn.user_id == user_id)
        )
        return {check_in_date or created_at.date() for check_in_date, created_at in result.all()}

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_with_children(self, check_in_id: UUID) -> None:
        """
        Delete a check-in and everything hanging off it.

        Order: upload rows, then project update rows, then the check-in row.
        Storage objects are not touched here; callers remove them first.

        SQL Generated:
            DELETE FROM uploads WHERE check_in_id = '...'
            DELETE FROM project_updates WHERE check_in_id = '...'
            DELETE FROM check_ins WHERE id = '...'
        """
        await self.session.execute(delete(Upload).where(Upload.check_in_id == check_in_id))
        await self.session.execute(
            delete(ProjectUpdate).where(ProjectUpdate.check_in_id == check_in_id)
        )
        await self.session.execute(delete(CheckIn).where(CheckIn.id == check_in_id))
        await self.session.flush()
