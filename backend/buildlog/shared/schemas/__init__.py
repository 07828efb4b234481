"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, error and health responses
- user: User and authentication schemas
- project: Project manager schemas
- check_in: Composer, history and edit schemas
- upload: Staged upload and diagnostics schemas
- settings: Brand/audience settings schemas
- dashboard: Home summary

Usage:
======
    from buildlog.shared.schemas.user import UserCreate, UserResponse, AuthResponse
    from buildlog.shared.schemas.check_in import CheckInCreate, CheckInResponse
"""

from buildlog.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from buildlog.shared.schemas.user import (
    Credentials,
    UserCreate,
    UserLogin,
    UserResponse,
    AuthResponse,
)
from buildlog.shared.schemas.project import (
    ProjectCreate,
    ProjectPatch,
    ProjectResponse,
)
from buildlog.shared.schemas.check_in import (
    ProjectUpdateInput,
    UploadInput,
    CheckInCreate,
    ProjectUpdateEdit,
    UploadCaptionEdit,
    CheckInPatch,
    ProjectUpdateResponse,
    UploadResponse,
    CheckInResponse,
    CheckInDateGroup,
    CheckInHistoryResponse,
    PromptsResponse,
)
from buildlog.shared.schemas.upload import (
    StagedUploadResponse,
    SkippedFileResponse,
    UploadBatchResponse,
    DebugUploadProbe,
    DebugUploadsResponse,
)
from buildlog.shared.schemas.settings import SettingsUpdate, SettingsResponse
from buildlog.shared.schemas.dashboard import DashboardResponse

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "Credentials",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    # Project
    "ProjectCreate",
    "ProjectPatch",
    "ProjectResponse",
    # Check-in
    "ProjectUpdateInput",
    "UploadInput",
    "CheckInCreate",
    "ProjectUpdateEdit",
    "UploadCaptionEdit",
    "CheckInPatch",
    "ProjectUpdateResponse",
    "UploadResponse",
    "CheckInResponse",
    "CheckInDateGroup",
    "CheckInHistoryResponse",
    "PromptsResponse",
    # Upload
    "StagedUploadResponse",
    "SkippedFileResponse",
    "UploadBatchResponse",
    "DebugUploadProbe",
    "DebugUploadsResponse",
    # Settings & dashboard
    "SettingsUpdate",
    "SettingsResponse",
    "DashboardResponse",
]
