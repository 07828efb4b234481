"""
Settings Schemas

Brand and audience configuration. ``audience_interests`` accepts a list
(stored as given) or a comma-separated string (split, trimmed, empties
dropped).
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from buildlog.shared.schemas.common import BaseSchema


class SettingsUpdate(BaseModel):
    """Schema for saving settings. The whole row is replaced."""

    business_name: Optional[str] = None
    business_description: Optional[str] = None
    brand_voice: Optional[str] = None
    audience_description: Optional[str] = None
    audience_interests: Optional[Union[list[str], str]] = None
    notification_email: Optional[str] = None


class SettingsResponse(BaseSchema):
    """
    Schema for settings response.

    ``exists`` is false when the user has never saved settings; the body
    then carries defaults.
    """

    exists: bool
    business_name: Optional[str] = None
    business_description: Optional[str] = None
    brand_voice: Optional[str] = None
    audience_description: Optional[str] = None
    audience_interests: list[str] = Field(default_factory=list)
    audience_interests_text: str = ""
    notification_email: Optional[str] = None
