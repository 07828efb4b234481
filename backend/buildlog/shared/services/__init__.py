"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ StorageAdapter (S3)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Rely on the request-scoped session for transactions
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, identity lookup
- ProjectService: Project CRUD with form normalization
- CheckInService: Check-in save, history, edit, delete
- UploadService: Upload ingestion and diagnostics
- SettingsService: Settings defaults and upsert
- DashboardService: Home screen summary and streak
- PromptService: Reflection prompts for the composer

Usage:
======
    from buildlog.shared.services import ProjectService

    service = ProjectService(db)
    project = await service.create_project(user_id, name="Widget")
"""

from buildlog.shared.services.auth_service import AuthService
from buildlog.shared.services.project_service import ProjectService
from buildlog.shared.services.check_in_service import CheckInService
from buildlog.shared.services.upload_service import UploadService, IncomingFile
from buildlog.shared.services.settings_service import SettingsService
from buildlog.shared.services.dashboard_service import DashboardService
from buildlog.shared.services.prompt_service import PromptService

__all__ = [
    "AuthService",
    "ProjectService",
    "CheckInService",
    "UploadService",
    "IncomingFile",
    "SettingsService",
    "DashboardService",
    "PromptService",
]
