"""
Buildlog SQLAlchemy Models

This package contains all database models for the Buildlog application.

Model Hierarchy:
================
    User
       ├── projects (Project[])
       ├── check_ins (CheckIn[])
       │      ├── project_updates (ProjectUpdate[])  ← project_id is a soft reference
       │      └── uploads (Upload[])
       └── user_settings (UserSettings, 0..1)

Models Overview:
================
- Base: Base class, timestamp mixin, portable column types
- User: Registered journal owner
- Project: A build the user is tracking
- CheckIn: A morning / midday / evening journal entry
- ProjectUpdate: What happened on one project during a check-in
- Upload: Screenshot or recording attached to a check-in
- UserSettings: Brand and audience configuration

Usage:
======
    from buildlog.shared.models import User, Project, CheckIn

    check_in = await repo.get_for_user_with_children(check_in_id, user_id)
    check_in.project_updates  # Updates written with this check-in
    check_in.uploads          # Attached media
"""

from buildlog.shared.models.base import Base, TimestampMixin, UUIDType, StringList
from buildlog.shared.models.enums import (
    ProjectStatus,
    CheckInType,
    DayType,
    UploadOrigin,
    PromptCategory,
)
from buildlog.shared.models.user import User
from buildlog.shared.models.project import Project
from buildlog.shared.models.check_in import CheckIn
from buildlog.shared.models.project_update import ProjectUpdate
from buildlog.shared.models.upload import Upload
from buildlog.shared.models.user_settings import UserSettings

__all__ = [
    # Base classes, mixins and column types
    "Base",
    "TimestampMixin",
    "UUIDType",
    "StringList",
    # Enums
    "ProjectStatus",
    "CheckInType",
    "DayType",
    "UploadOrigin",
    "PromptCategory",
    # Core models
    "User",
    "Project",
    "CheckIn",
    "ProjectUpdate",
    "Upload",
    "UserSettings",
]
