"""
Project Schemas

Request/response models for the project manager.

``technologies`` is accepted either as a list or as the comma-separated
string a text input produces. Responses return both the list and the
display string (``technologies_text``) so an edit form can be refilled.
"""

from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, Field

from buildlog.shared.models.enums import ProjectStatus
from buildlog.shared.schemas.common import BaseSchema


class ProjectCreate(BaseModel):
    """
    Schema for creating a project.

    ``name`` is checked by the service after trimming, so a blank name is
    reported as a validation error rather than a schema error.
    """

    name: str = ""
    description: Optional[str] = None
    goals: Optional[str] = None
    target_audience: Optional[str] = None
    content_angle: Optional[str] = None
    technologies: Optional[Union[list[str], str]] = Field(
        default=None,
        description='List of technologies, or a comma-separated string ("Next.js, Postgres")',
    )
    target_completion_date: Optional[date] = None


class ProjectPatch(BaseModel):
    """
    Schema for editing a project.

    Only fields present in the request body are written; a present field
    replaces the stored value (empty strings become null).
    """

    name: Optional[str] = None
    description: Optional[str] = None
    goals: Optional[str] = None
    target_audience: Optional[str] = None
    content_angle: Optional[str] = None
    technologies: Optional[Union[list[str], str]] = None
    target_completion_date: Optional[date] = None
    status: Optional[ProjectStatus] = None
    progress_percentage: Optional[int] = Field(default=None, ge=0, le=100)


class ProjectResponse(BaseSchema):
    """Schema for project response."""

    id: str
    name: str
    description: Optional[str] = None
    goals: Optional[str] = None
    target_audience: Optional[str] = None
    content_angle: Optional[str] = None
    technologies: list[str] = Field(default_factory=list)
    technologies_text: str = ""
    target_completion_date: Optional[date] = None
    status: ProjectStatus
    progress_percentage: int
    created_at: datetime
    updated_at: datetime
