"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's database session.
The storage adapter is a process-wide singleton (it only holds a lazily
created boto3 client) and is exposed through ``get_storage`` so tests can
swap it out.

Usage:
======
    from buildlog.api.dependencies.services import get_project_service

    @router.post("")
    async def create_project(
        data: ProjectCreate,
        service: ProjectService = Depends(get_project_service),
    ):
        ...
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.api.dependencies.database import get_db
from buildlog.shared.adapters.storage_adapter import StorageAdapter
from buildlog.shared.services.auth_service import AuthService
from buildlog.shared.services.check_in_service import CheckInService
from buildlog.shared.services.dashboard_service import DashboardService
from buildlog.shared.services.project_service import ProjectService
from buildlog.shared.services.prompt_service import PromptService
from buildlog.shared.services.settings_service import SettingsService
from buildlog.shared.services.upload_service import UploadService


@lru_cache
def get_storage() -> StorageAdapter:
    """Dependency to get the shared StorageAdapter."""
    return StorageAdapter()


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_project_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectService:
    """Dependency to get ProjectService instance."""
    return ProjectService(db)


async def get_check_in_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageAdapter = Depends(get_storage),
) -> CheckInService:
    """Dependency to get CheckInService instance."""
    return CheckInService(db, storage)


async def get_upload_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageAdapter = Depends(get_storage),
) -> UploadService:
    """Dependency to get UploadService instance."""
    return UploadService(db, storage)


async def get_settings_service(
    db: AsyncSession = Depends(get_db),
) -> SettingsService:
    """Dependency to get SettingsService instance."""
    return SettingsService(db)


async def get_dashboard_service(
    db: AsyncSession = Depends(get_db),
) -> DashboardService:
    """Dependency to get DashboardService instance."""
    return DashboardService(db)


async def get_prompt_service() -> PromptService:
    """Dependency to get PromptService instance."""
    return PromptService()
