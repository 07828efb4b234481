"""
UserSettings Repository

One settings row per user, keyed by ``user_id``. A missing row is a normal
state (the user has never saved settings), not an error.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.models.user_settings import UserSettings
from buildlog.shared.repositories.base import BaseRepository


class UserSettingsRepository(BaseRepository[UserSettings]):
    """Repository for UserSettings database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserSettings, session)

    async def get_by_user_id(self, user_id: UUID) -> Optional[UserSettings]:
        """
        Get the user's settings row.

        SQL Generated:
            SELECT * FROM user_settings WHERE user_id = '...'
        """
        result = await self.session.execute(
            select(UserSettings).where(UserSettings.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert(self, user_id: UUID, values: dict[str, Any]) -> UserSettings:
        """
        Insert or replace the user's settings.

        Every key in ``values`` overwrites the stored column, including
        None. Saving the same payload twice leaves exactly one row.
        """
        existing = await self.get_by_user_id(user_id)
        if existing is None:
            return await self.create(user_id=user_id, **values)
        return await self.apply(existing, values)
