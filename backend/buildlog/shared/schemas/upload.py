"""
Upload Schemas

Responses for staging files in storage before a check-in is saved, and
for the upload diagnostics endpoint.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class StagedUploadResponse(BaseModel):
    """
    A file written to storage but not yet attached to a check-in.

    Send ``file_url`` back in ``CheckInCreate.uploads`` to attach it.
    """

    file_name: str
    file_url: str
    file_type: str
    file_size: int
    display_url: Optional[str] = None


class SkippedFileResponse(BaseModel):
    """A file that was filtered out or that storage refused."""

    file_name: str
    file_type: str
    file_size: Optional[int] = None
    reason: str = Field(description='"unsupported_type", "too_large" or "storage_error"')


class UploadBatchResponse(BaseModel):
    """Result of one ingestion call."""

    uploaded: list[StagedUploadResponse]
    skipped: list[SkippedFileResponse]


class DebugUploadProbe(BaseModel):
    """URL resolution probe for the most recent upload."""

    file_url: str
    storage_path: str
    public_url: Optional[str] = None
    signed_url: Optional[str] = None
    signed_url_error: Optional[str] = None


class DebugUploadsResponse(BaseModel):
    """Diagnostics for URL/signing mismatches."""

    user_id: str
    bucket: str
    public_bucket: bool
    recent_uploads: list[dict[str, Any]]
    storage_objects: list[dict[str, Any]]
    storage_error: Optional[str] = None
    probe: Optional[DebugUploadProbe] = None
