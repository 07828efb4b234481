"""
Settings Handler

Per-user business and audience profile.

    GET /settings  → current values (defaults with exists=false if never saved)
    PUT /settings  → replace every field (upsert)
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_settings_service
from buildlog.shared.schemas.settings import SettingsResponse, SettingsUpdate
from buildlog.shared.services.settings_service import SettingsService
from buildlog.shared.utils.text import join_comma_list


router = APIRouter()


def _build_settings_response(values: dict[str, Any]) -> SettingsResponse:
    return SettingsResponse(
        **values,
        audience_interests_text=join_comma_list(values["audience_interests"]),
    )


@router.get("", response_model=SettingsResponse)
async def get_settings(
    current_user: CurrentUser,
    service: SettingsService = Depends(get_settings_service),
):
    """Get the user's settings."""
    values = await service.get_settings(UUID(current_user["user_id"]), current_user["email"])
    return _build_settings_response(values)


@router.put("", response_model=SettingsResponse)
async def save_settings(
    request: SettingsUpdate,
    current_user: CurrentUser,
    service: SettingsService = Depends(get_settings_service),
):
    """Save the user's settings. Saving the same values twice is a no-op."""
    values = await service.save_settings(
        UUID(current_user["user_id"]),
        current_user["email"],
        business_name=request.business_name,
        business_description=request.business_description,
        brand_voice=request.brand_voice,
        audience_description=request.audience_description,
        audience_interests=request.audience_interests,
        notification_email=request.notification_email,
    )
    return _build_settings_response(values)
