"""
Upload Service

One ingestion routine for every input channel (file picker, drag-and-drop,
clipboard paste). Files are written to storage before the check-in exists;
the check-in save later records their paths.

Ingestion Flow:
===============
    IncomingFile[] ──► filter ──► read ──► name ──► key ──► storage ──► display URL
                        │                    │        │        │
                        │                    │        │        └─ failure → skipped, batch continues
                        │                    │        └─ {user_id}/{timestamp_ms}_{sanitized}
                        │                    └─ clipboard blobs: clipboard_{timestamp_ms}.{ext}
                        └─ unsupported type / over 50 MB → skipped, never read or sent

Limits:
=======
    Images: image/png, image/jpeg, image/gif, image/webp
    Videos: video/mp4, video/webm
    Size:   MAX_UPLOAD_BYTES (50 MB)
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.config.settings import settings
from buildlog.shared.adapters.storage_adapter import StorageAdapter
from buildlog.shared.core.exceptions import AuthorizationError, ObjectExistsError, StorageError
from buildlog.shared.core.logging import get_logger
from buildlog.shared.models.enums import UploadOrigin
from buildlog.shared.repositories.upload_repository import UploadRepository
from buildlog.shared.utils.storage_paths import (
    belongs_to_user,
    build_object_key,
    clipboard_filename,
    current_timestamp_ms,
    get_storage_path,
)

logger = get_logger(__name__)


ALLOWED_CONTENT_TYPES = frozenset(
    {
        "image/png",
        "image/jpeg",
        "image/gif",
        "image/webp",
        "video/mp4",
        "video/webm",
    }
)

SKIP_UNSUPPORTED_TYPE = "unsupported_type"
SKIP_TOO_LARGE = "too_large"
SKIP_STORAGE_ERROR = "storage_error"

# A key taken by an earlier upload in the same millisecond moves to the next one
MAX_KEY_ATTEMPTS = 5

DEBUG_LISTING_LIMIT = 10


@dataclass
class IncomingFile:
    """
    A blob from any input channel, normalized for ingestion.

    Multipart parts arrive unread: ``reader`` pulls the contents and
    ``declared_size`` carries the size the parser saw, so rejected files
    are never loaded.
    """

    file_name: str
    content_type: str
    data: Optional[bytes] = None
    origin: UploadOrigin = UploadOrigin.PICKER
    declared_size: Optional[int] = None
    reader: Optional[Callable[[], Awaitable[bytes]]] = None

    @property
    def size(self) -> Optional[int]:
        if self.data is not None:
            return len(self.data)
        return self.declared_size

    async def read(self) -> bytes:
        if self.data is None:
            self.data = await self.reader() if self.reader else b""
        return self.data


def rejection_reason(incoming: IncomingFile, max_bytes: int) -> Optional[str]:
    """Why a file would be skipped, or None if it is accepted (so far as its size is known)."""
    if incoming.content_type not in ALLOWED_CONTENT_TYPES:
        return SKIP_UNSUPPORTED_TYPE
    if incoming.size is not None and incoming.size > max_bytes:
        return SKIP_TOO_LARGE
    return None


def _skipped(incoming: IncomingFile, reason: str) -> dict[str, Any]:
    return {
        "file_name": incoming.file_name,
        "file_type": incoming.content_type,
        "file_size": incoming.size,
        "reason": reason,
    }


class UploadService:
    """
    Service for staging uploads in object storage.

    Attributes:
        session: Database session (diagnostics only)
        storage: Object storage adapter
        max_bytes: Size limit per file
    """

    def __init__(
        self,
        session: AsyncSession,
        storage: StorageAdapter,
        max_bytes: Optional[int] = None,
    ) -> None:
        self.session = session
        self.storage = storage
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES
        self.uploads = UploadRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # INGESTION
    # ═══════════════════════════════════════════════════════════════════════════

    async def ingest(
        self,
        user_id: UUID,
        files: list[IncomingFile],
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        """
        Upload accepted files to storage.

        Rejected files are filtered out first and are never read or sent.
        A file storage refuses is skipped on its own; the rest of the
        batch still goes through.

        Args:
            user_id: Owner; becomes the object key prefix
            files: Normalized blobs from any channel

        Returns:
            Tuple of (uploaded, skipped). Each uploaded entry holds
            file_name, file_url (storage path), file_type, file_size and
            display_url. Each skipped entry names its reason.
        """
        accepted: list[IncomingFile] = []
        skipped: list[dict[str, Any]] = []

        for incoming in files:
            reason = rejection_reason(incoming, self.max_bytes)
            if reason:
                skipped.append(_skipped(incoming, reason))
            else:
                accepted.append(incoming)

        uploaded = []
        for incoming in accepted:
            await incoming.read()
            # Parts without a declared size are only measurable once read
            reason = rejection_reason(incoming, self.max_bytes)
            if reason:
                skipped.append(_skipped(incoming, reason))
                continue

            try:
                uploaded.append(await self._upload_one(user_id, incoming))
            except StorageError as e:
                logger.error(
                    "File not staged",
                    user_id=str(user_id),
                    file_name=incoming.file_name,
                    error=e.message,
                )
                skipped.append(_skipped(incoming, SKIP_STORAGE_ERROR))

        if skipped:
            logger.info("Skipped files", user_id=str(user_id), count=len(skipped))

        return uploaded, skipped

    async def remove_staged(self, user_id: UUID, path_or_url: str) -> bool:
        """
        Remove a staged object that was never attached to a check-in.

        Best-effort: storage failures are logged and reported as False.

        Raises:
            AuthorizationError: If the path is outside the user's folder
        """
        path = get_storage_path(path_or_url, self.storage.bucket)
        if not belongs_to_user(path, str(user_id)):
            raise AuthorizationError("Cannot remove files outside your storage folder")

        failed = await asyncio.to_thread(self.storage.remove_objects, [path])
        if failed:
            logger.warning("Staged upload not removed", user_id=str(user_id), path=path)
            return False

        logger.info("Staged upload removed", user_id=str(user_id), path=path)
        return True

    # ═══════════════════════════════════════════════════════════════════════════
    # DIAGNOSTICS
    # ═══════════════════════════════════════════════════════════════════════════

    async def debug_report(self, user_id: UUID) -> dict[str, Any]:
        """
        Collect what's needed to debug URL/signing mismatches.

        Returns recent upload rows, a listing of the user's storage folder,
        and for the most recent upload its resolved path, public URL and
        signed URL (or the signing error).
        """
        recent = await self.uploads.list_recent_for_user(user_id, limit=DEBUG_LISTING_LIMIT)

        storage_objects: list[dict[str, Any]] = []
        storage_error = None
        try:
            storage_objects = await asyncio.to_thread(
                self.storage.list_objects, f"{user_id}/", DEBUG_LISTING_LIMIT
            )
        except StorageError as e:
            storage_error = e.message

        probe = None
        if recent:
            latest = recent[0]
            path = get_storage_path(latest.file_url, self.storage.bucket)
            probe = {
                "file_url": latest.file_url,
                "storage_path": path,
                "public_url": self.storage.public_url(path),
                "signed_url": None,
                "signed_url_error": None,
            }
            try:
                probe["signed_url"] = await asyncio.to_thread(self.storage.create_signed_url, path)
            except StorageError as e:
                probe["signed_url_error"] = e.message

        return {
            "user_id": str(user_id),
            "bucket": self.storage.bucket,
            "public_bucket": self.storage.public_bucket,
            "recent_uploads": [
                {
                    "id": str(upload.id),
                    "check_in_id": str(upload.check_in_id),
                    "file_name": upload.file_name,
                    "file_url": upload.file_url,
                    "file_type": upload.file_type,
                    "file_size": upload.file_size,
                    "created_at": upload.created_at.isoformat(),
                }
                for upload in recent
            ],
            "storage_objects": storage_objects,
            "storage_error": storage_error,
            "probe": probe,
        }

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _upload_one(self, user_id: UUID, incoming: IncomingFile) -> dict[str, Any]:
        timestamp_ms = current_timestamp_ms()
        for attempt in range(MAX_KEY_ATTEMPTS):
            file_name = incoming.file_name
            if incoming.origin == UploadOrigin.CLIPBOARD or not file_name:
                file_name = clipboard_filename(incoming.content_type, timestamp_ms)

            path = build_object_key(str(user_id), file_name, timestamp_ms)
            try:
                await asyncio.to_thread(
                    self.storage.upload_object, path, incoming.data, incoming.content_type
                )
                break
            except ObjectExistsError:
                if attempt == MAX_KEY_ATTEMPTS - 1:
                    raise
                timestamp_ms += 1

        try:
            display_url = await asyncio.to_thread(self.storage.display_url, path)
        except StorageError:
            # Stored either way; the composer can still attach it by path
            display_url = None

        logger.info(
            "File staged",
            user_id=str(user_id),
            path=path,
            origin=incoming.origin.value,
            size=incoming.size,
        )
        return {
            "file_name": file_name,
            "file_url": path,
            "file_type": incoming.content_type,
            "file_size": incoming.size,
            "display_url": display_url,
        }
