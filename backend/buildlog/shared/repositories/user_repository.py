"""
User Repository

Account lookups for registration and login. Emails are stored lowercased,
so every lookup lowercases its input as well.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.repositories.base import BaseRepository
from buildlog.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for journal owners."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).

        SQL Generated:
            SELECT * FROM users WHERE email = 'maker@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Used to reject duplicate registrations."""
        return await self.get_by_email(email) is not None
