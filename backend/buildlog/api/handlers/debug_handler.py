"""
Debug Handler

Diagnostics for storage URL and signing problems. Only mounted when
DEBUG_ENDPOINTS_ENABLED is set.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_upload_service
from buildlog.shared.schemas.upload import DebugUploadsResponse
from buildlog.shared.services.upload_service import UploadService


router = APIRouter()


@router.get("/uploads", response_model=DebugUploadsResponse)
async def debug_uploads(
    current_user: CurrentUser,
    service: UploadService = Depends(get_upload_service),
):
    """
    Report recent uploads, the storage folder listing and a URL probe for
    the latest upload. Storage failures are reported in the body.
    """
    report = await service.debug_report(UUID(current_user["user_id"]))
    return DebugUploadsResponse(**report)
