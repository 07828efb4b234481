"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. They only flush; the request-scoped session commits.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]             ← Generic CRUD operations
         │
         ├── UserRepository               ← Account lookups
         ├── ProjectRepository            ← Owner-scoped projects, status counts
         ├── CheckInRepository            ← History, detail, cascading delete
         ├── ProjectUpdateRepository      ← Updates scoped by check-in
         ├── UploadRepository             ← Upload metadata rows
         └── UserSettingsRepository       ← Upsert by user_id

Usage Example:
==============
    from buildlog.shared.repositories import CheckInRepository

    async def latest(db: AsyncSession, user_id: UUID):
        return await CheckInRepository(db).list_recent_for_user(user_id, limit=50)
"""

from buildlog.shared.repositories.base import BaseRepository
from buildlog.shared.repositories.user_repository import UserRepository
from buildlog.shared.repositories.project_repository import ProjectRepository
from buildlog.shared.repositories.check_in_repository import CheckInRepository
from buildlog.shared.repositories.project_update_repository import ProjectUpdateRepository
from buildlog.shared.repositories.upload_repository import UploadRepository
from buildlog.shared.repositories.user_settings_repository import UserSettingsRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ProjectRepository",
    "CheckInRepository",
    "ProjectUpdateRepository",
    "UploadRepository",
    "UserSettingsRepository",
]
