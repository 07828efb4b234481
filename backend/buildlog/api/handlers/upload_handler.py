"""
Upload Handler

Stages media in object storage before a check-in is saved.

FLOW:
=====
    Picker / drop / paste
           │  multipart: files[], origin
           ▼
    POST /uploads ──► UploadService.ingest
           │              ├── unsupported type / too large → skipped[] (never read)
           │              └── accepted → storage ─┬─ stored  → uploaded[]
           │                                      └─ refused → skipped[]
           ▼
    client keeps uploaded[] in the composer and sends them with
    POST /check-ins (or removes one with DELETE /uploads/staged)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_upload_service
from buildlog.shared.models.enums import UploadOrigin
from buildlog.shared.schemas.common import MessageResponse
from buildlog.shared.schemas.upload import (
    SkippedFileResponse,
    StagedUploadResponse,
    UploadBatchResponse,
)
from buildlog.shared.services.upload_service import IncomingFile, UploadService


DEFAULT_CONTENT_TYPE = "application/octet-stream"

router = APIRouter()


@router.post("", response_model=UploadBatchResponse)
async def upload_files(
    current_user: CurrentUser,
    files: list[UploadFile] = File(...),
    origin: UploadOrigin = Form(UploadOrigin.PICKER),
    service: UploadService = Depends(get_upload_service),
):
    """
    Upload one or more files.

    Unsupported or oversized files are reported in ``skipped`` without
    being read; files storage refuses are skipped too. The rest are
    returned in ``uploaded``.
    """
    incoming = [
        IncomingFile(
            file_name=upload.filename or "",
            content_type=upload.content_type or DEFAULT_CONTENT_TYPE,
            origin=origin,
            declared_size=upload.size,
            reader=upload.read,
        )
        for upload in files
    ]

    uploaded, skipped = await service.ingest(UUID(current_user["user_id"]), incoming)

    return UploadBatchResponse(
        uploaded=[StagedUploadResponse(**item) for item in uploaded],
        skipped=[SkippedFileResponse(**item) for item in skipped],
    )


@router.delete("/staged", response_model=MessageResponse)
async def remove_staged_upload(
    current_user: CurrentUser,
    path: str = Query(..., min_length=1),
    service: UploadService = Depends(get_upload_service),
):
    """
    Remove a staged file that the user dropped from the composer.

    Raises:
        403: If the path is outside the user's storage folder
    """
    removed = await service.remove_staged(UUID(current_user["user_id"]), path)
    message = "Staged upload removed" if removed else "Staged upload could not be removed"
    return MessageResponse(message=message)
