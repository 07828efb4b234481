"""
Check-in Schemas

Request/response models for composing, listing, viewing and editing
check-ins.

Shapes:
=======
    CheckInCreate
       ├── project_update: ProjectUpdateInput (0..1, one project per check-in)
       └── uploads: UploadInput[]          ← rows for files already in storage

    CheckInPatch
       ├── project_updates: ProjectUpdateEdit[]   ← keyed by update id
       ├── upload_captions: UploadCaptionEdit[]   ← keyed by upload id
       └── new_uploads: UploadInput[]

    CheckInHistoryResponse
       └── groups: CheckInDateGroup[]  ← newest date first
              └── check_ins: CheckInResponse[]
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from buildlog.shared.models.enums import CheckInType, DayType, PromptCategory
from buildlog.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# INPUTS
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectUpdateInput(BaseModel):
    """What happened on the selected project."""

    project_id: UUID
    update_text: Optional[str] = None
    problem: Optional[str] = None
    what_didnt_work: Optional[str] = None
    what_worked: Optional[str] = None
    surprise: Optional[str] = None
    is_win: bool = False
    is_blocker: bool = False
    blocker_description: Optional[str] = None


class UploadInput(BaseModel):
    """Metadata for a file already written to storage by ``POST /uploads``."""

    file_name: str
    file_url: str = Field(description="Storage path; absolute URLs are reduced to the path")
    file_type: str
    file_size: int = Field(default=0, ge=0)
    what_am_i_looking_at: Optional[str] = None
    why_does_this_matter: Optional[str] = None


class CheckInCreate(BaseModel):
    """
    Schema for saving a new check-in.

    ``local_timestamp`` is the client's wall clock. It decides the
    morning/midday/evening slot and the check-in date unless
    ``check_in_type`` / ``check_in_date`` are given explicitly.
    """

    local_timestamp: Optional[datetime] = None
    check_in_type: Optional[CheckInType] = None
    check_in_date: Optional[date] = None
    general_notes: Optional[str] = None
    day_type: Optional[DayType] = None
    breakthroughs: Optional[str] = None
    is_video_worthy: bool = False
    is_post_worthy: bool = False
    in_my_own_words: Optional[str] = None
    project_update: Optional[ProjectUpdateInput] = None
    uploads: list[UploadInput] = Field(default_factory=list)


class ProjectUpdateEdit(BaseModel):
    """Edit to an existing project update. Absent fields are left alone."""

    id: UUID
    update_text: Optional[str] = None
    problem: Optional[str] = None
    what_didnt_work: Optional[str] = None
    what_worked: Optional[str] = None
    surprise: Optional[str] = None
    is_win: Optional[bool] = None
    is_blocker: Optional[bool] = None
    blocker_description: Optional[str] = None


class UploadCaptionEdit(BaseModel):
    """Edit to an existing upload's captions."""

    id: UUID
    what_am_i_looking_at: Optional[str] = None
    why_does_this_matter: Optional[str] = None


class CheckInPatch(BaseModel):
    """Schema for editing a check-in. Absent fields are left alone."""

    general_notes: Optional[str] = None
    day_type: Optional[DayType] = None
    breakthroughs: Optional[str] = None
    is_video_worthy: Optional[bool] = None
    is_post_worthy: Optional[bool] = None
    in_my_own_words: Optional[str] = None
    project_updates: list[ProjectUpdateEdit] = Field(default_factory=list)
    upload_captions: list[UploadCaptionEdit] = Field(default_factory=list)
    new_uploads: list[UploadInput] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectUpdateResponse(BaseSchema):
    """A project update with the project's current name resolved."""

    id: str
    project_id: str
    project_name: str
    update_text: Optional[str] = None
    problem: Optional[str] = None
    what_didnt_work: Optional[str] = None
    what_worked: Optional[str] = None
    surprise: Optional[str] = None
    is_win: bool
    is_blocker: bool
    blocker_description: Optional[str] = None


class UploadResponse(BaseSchema):
    """
    An attached upload.

    ``display_url`` is resolved at read time (public or signed) and is only
    populated on the detail view.
    """

    id: str
    file_name: str
    file_url: str
    file_type: str
    file_size: int
    what_am_i_looking_at: Optional[str] = None
    why_does_this_matter: Optional[str] = None
    display_url: Optional[str] = None
    created_at: datetime


class CheckInResponse(BaseSchema):
    """A check-in with its children and derived badge counts."""

    id: str
    check_in_type: CheckInType
    check_in_date: Optional[date] = None
    general_notes: Optional[str] = None
    day_type: Optional[DayType] = None
    breakthroughs: Optional[str] = None
    is_video_worthy: bool
    is_post_worthy: bool
    in_my_own_words: Optional[str] = None
    project_updates: list[ProjectUpdateResponse] = Field(default_factory=list)
    uploads: list[UploadResponse] = Field(default_factory=list)
    project_names: list[str] = Field(default_factory=list)
    win_count: int = 0
    blocker_count: int = 0
    image_count: int = 0
    video_count: int = 0
    created_at: datetime
    updated_at: datetime


class CheckInDateGroup(BaseModel):
    """Check-ins sharing one calendar date."""

    check_in_date: date
    check_ins: list[CheckInResponse]
    win_count: int = 0
    blocker_count: int = 0


class CheckInHistoryResponse(BaseModel):
    """History view: date groups, newest first."""

    groups: list[CheckInDateGroup]
    total: int


class PromptsResponse(BaseModel):
    """Shuffled reflection prompts for the composer."""

    prompts: list[str]
    categories: list[PromptCategory]
