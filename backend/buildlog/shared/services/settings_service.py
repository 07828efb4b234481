"""
Settings Service

Brand and audience settings, one row per user.

A user who never saved settings gets defaults (with the account email as
notification address) instead of an error. Saving is an upsert keyed by
user_id, so repeating a save never creates a second row.
"""

from typing import Any, Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.core.logging import get_logger
from buildlog.shared.models.user_settings import UserSettings
from buildlog.shared.repositories.user_settings_repository import UserSettingsRepository
from buildlog.shared.utils.text import normalize_optional_text, parse_comma_list

logger = get_logger(__name__)


TEXT_FIELDS = (
    "business_name",
    "business_description",
    "brand_voice",
    "audience_description",
    "notification_email",
)


class SettingsService:
    """Service for user settings."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserSettingsRepository(session)

    async def get_settings(self, user_id: UUID, account_email: str) -> dict[str, Any]:
        """
        Load settings or defaults.

        Returns:
            Dict of settings fields plus ``exists``
        """
        row = await self.repo.get_by_user_id(user_id)
        return self._to_dict(row, account_email)

    async def save_settings(
        self,
        user_id: UUID,
        account_email: str,
        *,
        business_name: Optional[str] = None,
        business_description: Optional[str] = None,
        brand_voice: Optional[str] = None,
        audience_description: Optional[str] = None,
        audience_interests: Union[str, list[str], None] = None,
        notification_email: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Upsert the user's settings. Every field is replaced.

        ``audience_interests`` as a string is split on commas; as a list it
        is kept entry for entry (after trimming).
        """
        values: dict[str, Any] = {
            "business_name": business_name,
            "business_description": business_description,
            "brand_voice": brand_voice,
            "audience_description": audience_description,
            "notification_email": notification_email,
        }
        for field in TEXT_FIELDS:
            values[field] = normalize_optional_text(values[field])
        values["audience_interests"] = parse_comma_list(audience_interests) or None

        row = await self.repo.upsert(user_id, values)
        logger.info("Settings saved", user_id=str(user_id))
        return self._to_dict(row, account_email)

    @staticmethod
    def _to_dict(row: Optional[UserSettings], account_email: str) -> dict[str, Any]:
        if row is None:
            return {
                "exists": False,
                "business_name": None,
                "business_description": None,
                "brand_voice": None,
                "audience_description": None,
                "audience_interests": [],
                "notification_email": account_email,
            }
        return {
            "exists": True,
            "business_name": row.business_name,
            "business_description": row.business_description,
            "brand_voice": row.brand_voice,
            "audience_description": row.audience_description,
            "audience_interests": list(row.audience_interests or []),
            "notification_email": row.notification_email or account_email,
        }
