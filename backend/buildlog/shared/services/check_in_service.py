"""
Check-in Service

Business logic for composing, listing, viewing, editing and deleting
check-ins.

Save Flow:
==========
┌─────────────────────────────────────────────────────────────────────────────┐
│                          CHECK-IN SAVE                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   1. Resolve slot        local hour → morning / midday / evening            │
│   2. INSERT check_ins    one row                                            │
│   3. INSERT project_updates   0..1 row (one project per check-in)           │
│   4. INSERT uploads      rows for files already in storage                  │
│                                                                             │
│   All inserts share the request transaction: any failure rolls back        │
│   every row and surfaces as "Failed to save check-in: <message>".          │
│   Storage objects written before the save are then orphaned; their        │
│   paths are logged.                                                        │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Delete Flow:
============
    storage objects (best-effort) → upload rows → update rows → check-in row

Display URLs:
=============
``uploads.file_url`` only ever holds the bucket-relative path. Display URLs
are resolved per read and never written back.
"""

import asyncio
from collections import OrderedDict
from datetime import date
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.config.settings import settings
from buildlog.shared.adapters.storage_adapter import StorageAdapter
from buildlog.shared.core.exceptions import (
    CheckInNotFoundError,
    NotFoundError,
    PersistenceError,
    ProjectNotFoundError,
    StorageError,
    UploadNotFoundError,
    ValidationError,
)
from buildlog.shared.core.logging import get_logger
from buildlog.shared.models.check_in import CheckIn
from buildlog.shared.models.project_update import ProjectUpdate
from buildlog.shared.repositories.check_in_repository import CheckInRepository
from buildlog.shared.repositories.project_repository import ProjectRepository
from buildlog.shared.repositories.project_update_repository import ProjectUpdateRepository
from buildlog.shared.repositories.upload_repository import UploadRepository
from buildlog.shared.schemas.check_in import (
    CheckInCreate,
    CheckInPatch,
    ProjectUpdateEdit,
    ProjectUpdateInput,
    UploadInput,
)
from buildlog.shared.utils.storage_paths import belongs_to_user, get_storage_path
from buildlog.shared.utils.text import normalize_optional_text
from buildlog.shared.utils.timeslots import check_in_slot

logger = get_logger(__name__)


UNKNOWN_PROJECT = "Unknown project"

# Free-text fields on a project update
UPDATE_TEXT_FIELDS = (
    "update_text",
    "problem",
    "what_didnt_work",
    "what_worked",
    "surprise",
    "blocker_description",
)

# Free-text fields on a check-in
CHECK_IN_TEXT_FIELDS = ("general_notes", "breakthroughs", "in_my_own_words")


# ═══════════════════════════════════════════════════════════════════════════════
# PURE HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def group_date(check_in: CheckIn) -> date:
    """Date a check-in is grouped under; falls back to its creation date."""
    return check_in.check_in_date or check_in.created_at.date()


def group_check_ins_by_date(check_ins: list[CheckIn]) -> list[tuple[date, list[CheckIn]]]:
    """
    Group check-ins by calendar date, newest date first.

    Order inside a group follows the input order.

    Example:
        [(date(2024, 1, 3), [c3]), (date(2024, 1, 2), [c1, c2])]
    """
    groups: "OrderedDict[date, list[CheckIn]]" = OrderedDict()
    for check_in in check_ins:
        groups.setdefault(group_date(check_in), []).append(check_in)
    return sorted(groups.items(), key=lambda item: item[0], reverse=True)


def count_badges(check_in: CheckIn) -> dict[str, int]:
    """Derive the win / blocker / image / video counts shown on a card."""
    return {
        "win_count": sum(1 for update in check_in.project_updates if update.is_win),
        "blocker_count": sum(1 for update in check_in.project_updates if update.is_blocker),
        "image_count": sum(1 for upload in check_in.uploads if upload.is_image),
        "video_count": sum(1 for upload in check_in.uploads if upload.is_video),
    }


def enforce_blocker_description(update: dict[str, Any]) -> dict[str, Any]:
    """Null the blocker description unless the update is a blocker."""
    if not update.get("is_blocker"):
        update["blocker_description"] = None
    return update


class CheckInService:
    """
    Service for check-in operations.

    Attributes:
        session: Database session (request-scoped transaction)
        storage: Object storage adapter for display URLs and cleanup
    """

    def __init__(self, session: AsyncSession, storage: StorageAdapter) -> None:
        self.session = session
        self.storage = storage
        self.check_ins = CheckInRepository(session)
        self.projects = ProjectRepository(session)
        self.updates = ProjectUpdateRepository(session)
        self.uploads = UploadRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_check_in(self, user_id: UUID, data: CheckInCreate) -> CheckIn:
        """
        Save a check-in with its project update and upload rows.

        Args:
            user_id: Requesting user
            data: Composer payload

        Returns:
            The saved check-in with children loaded

        Raises:
            ProjectNotFoundError: If the selected project is not the user's
            ValidationError: If an upload path is outside the user's prefix
            PersistenceError: If any insert fails (nothing is kept)
        """
        slot_type, slot_date = check_in_slot(data.local_timestamp, settings.DEFAULT_TIMEZONE)
        upload_rows = [self._upload_row(user_id, upload) for upload in data.uploads]

        if data.project_update is not None:
            project = await self.projects.get_for_user(data.project_update.project_id, user_id)
            if not project:
                raise ProjectNotFoundError(str(data.project_update.project_id))

        try:
            check_in = await self.check_ins.create(
                user_id=user_id,
                check_in_type=data.check_in_type or slot_type,
                check_in_date=data.check_in_date or slot_date,
                general_notes=normalize_optional_text(data.general_notes),
                day_type=data.day_type,
                breakthroughs=normalize_optional_text(data.breakthroughs),
                is_video_worthy=data.is_video_worthy,
                is_post_worthy=data.is_post_worthy,
                in_my_own_words=normalize_optional_text(data.in_my_own_words),
            )

            if data.project_update is not None:
                await self.updates.create_many(
                    [self._update_row(check_in.id, data.project_update)]
                )

            if upload_rows:
                await self.uploads.create_many(
                    [{**row, "check_in_id": check_in.id} for row in upload_rows]
                )

        except SQLAlchemyError as e:
            logger.error(
                "Failed to save check-in",
                user_id=str(user_id),
                orphaned_paths=[row["file_url"] for row in upload_rows],
                error=str(e),
            )
            raise PersistenceError(f"Failed to save check-in: {e}") from e

        logger.info(
            "Check-in saved",
            user_id=str(user_id),
            check_in_id=str(check_in.id),
            check_in_type=check_in.check_in_type.value,
            uploads=len(upload_rows),
        )
        return await self.get_check_in(check_in.id, user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_check_ins(self, user_id: UUID, limit: Optional[int] = None) -> list[CheckIn]:
        """Latest check-ins with children, newest first."""
        return await self.check_ins.list_recent_for_user(
            user_id, limit=limit or settings.HISTORY_LIMIT
        )

    async def get_history(
        self,
        user_id: UUID,
        limit: Optional[int] = None,
    ) -> list[tuple[date, list[CheckIn]]]:
        """Latest check-ins grouped by date, newest date first."""
        return group_check_ins_by_date(await self.list_check_ins(user_id, limit))

    async def get_check_in(self, check_in_id: UUID, user_id: UUID) -> CheckIn:
        """
        Get one of the user's check-ins with children.

        Raises:
            CheckInNotFoundError: If missing or owned by another user
        """
        check_in = await self.check_ins.get_for_user(check_in_id, user_id)
        if not check_in:
            raise CheckInNotFoundError(str(check_in_id))
        return check_in

    async def project_names(self, check_ins: list[CheckIn], user_id: UUID) -> dict[UUID, str]:
        """
        Resolve project names for every update in ``check_ins``.

        Deleted projects map to "Unknown project".
        """
        project_ids = [
            update.project_id for check_in in check_ins for update in check_in.project_updates
        ]
        names = await self.projects.names_by_id(project_ids, user_id)
        return {project_id: names.get(project_id, UNKNOWN_PROJECT) for project_id in project_ids}

    async def display_urls(self, check_in: CheckIn) -> dict[UUID, Optional[str]]:
        """
        Resolve a display URL for each upload of a check-in.

        An upload whose URL cannot be signed maps to None so the rest of the
        check-in still renders.
        """
        urls: dict[UUID, Optional[str]] = {}
        for upload in check_in.uploads:
            path = get_storage_path(upload.file_url, self.storage.bucket)
            try:
                urls[upload.id] = await asyncio.to_thread(self.storage.display_url, path)
            except StorageError as e:
                logger.warning("Could not resolve display URL", path=path, error=e.message)
                urls[upload.id] = None
        return urls

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def update_check_in(
        self,
        check_in_id: UUID,
        user_id: UUID,
        patch: CheckInPatch,
    ) -> CheckIn:
        """
        Edit a check-in, its project updates and upload captions, and attach
        new uploads.

        Raises:
            CheckInNotFoundError: If missing or owned by another user
            NotFoundError: If an update or upload id is not part of the check-in
            PersistenceError: If any write fails
        """
        check_in = await self.get_check_in(check_in_id, user_id)
        new_upload_rows = [self._upload_row(user_id, upload) for upload in patch.new_uploads]

        fields = patch.model_dump(
            exclude_unset=True,
            include={
                "general_notes",
                "day_type",
                "breakthroughs",
                "is_video_worthy",
                "is_post_worthy",
                "in_my_own_words",
            },
        )
        for field in CHECK_IN_TEXT_FIELDS:
            if field in fields:
                fields[field] = normalize_optional_text(fields[field])
        for flag in ("is_video_worthy", "is_post_worthy"):
            if flag in fields and fields[flag] is None:
                fields.pop(flag)

        try:
            if fields:
                await self.check_ins.apply(check_in, fields)

            for edit in patch.project_updates:
                await self._apply_update_edit(check_in.id, edit)

            for caption in patch.upload_captions:
                upload = await self.uploads.get_for_check_in(caption.id, check_in.id)
                if not upload:
                    raise UploadNotFoundError(str(caption.id))
                changes = caption.model_dump(exclude_unset=True, exclude={"id"})
                await self.uploads.apply(
                    upload,
                    {key: normalize_optional_text(value) for key, value in changes.items()},
                )

            if new_upload_rows:
                await self.uploads.create_many(
                    [{**row, "check_in_id": check_in.id} for row in new_upload_rows]
                )

        except SQLAlchemyError as e:
            logger.error("Failed to update check-in", check_in_id=str(check_in_id), error=str(e))
            raise PersistenceError(f"Failed to update check-in: {e}") from e

        logger.info("Check-in updated", user_id=str(user_id), check_in_id=str(check_in_id))
        return await self.get_check_in(check_in_id, user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_upload(self, check_in_id: UUID, upload_id: UUID, user_id: UUID) -> None:
        """
        Remove one upload: storage object first (best-effort), then the row.

        Raises:
            CheckInNotFoundError: If the check-in is missing or not the user's
            UploadNotFoundError: If the upload is not attached to it
        """
        check_in = await self.get_check_in(check_in_id, user_id)
        upload = await self.uploads.get_for_check_in(upload_id, check_in.id)
        if not upload:
            raise UploadNotFoundError(str(upload_id))

        await self._remove_objects([get_storage_path(upload.file_url, self.storage.bucket)])
        await self.uploads.delete_row(upload.id)
        logger.info("Upload deleted", check_in_id=str(check_in_id), upload_id=str(upload_id))

    async def delete_check_in(self, check_in_id: UUID, user_id: UUID) -> None:
        """
        Delete a check-in and everything attached to it.

        Storage removal failures are logged and do not stop the row deletes.

        Raises:
            CheckInNotFoundError: If missing or owned by another user
        """
        check_in = await self.get_check_in(check_in_id, user_id)
        paths = [get_storage_path(upload.file_url, self.storage.bucket) for upload in check_in.uploads]

        await self._remove_objects(paths)
        await self.check_ins.delete_with_children(check_in.id)
        logger.info(
            "Check-in deleted",
            user_id=str(user_id),
            check_in_id=str(check_in_id),
            removed_objects=len(paths),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _remove_objects(self, paths: list[str]) -> None:
        if not paths:
            return
        failed = await asyncio.to_thread(self.storage.remove_objects, paths)
        if failed:
            logger.warning("Continuing after storage cleanup failure", paths=failed)

    async def _apply_update_edit(self, check_in_id: UUID, edit: ProjectUpdateEdit) -> ProjectUpdate:
        update = await self.updates.get_for_check_in(edit.id, check_in_id)
        if not update:
            raise NotFoundError("Project update", str(edit.id))

        changes = edit.model_dump(exclude_unset=True, exclude={"id"})
        for field in UPDATE_TEXT_FIELDS:
            if field in changes:
                changes[field] = normalize_optional_text(changes[field])
        for flag in ("is_win", "is_blocker"):
            if flag in changes and changes[flag] is None:
                changes.pop(flag)

        is_blocker = changes.get("is_blocker", update.is_blocker)
        if not is_blocker:
            changes["blocker_description"] = None

        return await self.updates.apply(update, changes)

    @staticmethod
    def _update_row(check_in_id: UUID, data: ProjectUpdateInput) -> dict[str, Any]:
        row = data.model_dump()
        for field in UPDATE_TEXT_FIELDS:
            row[field] = normalize_optional_text(row[field])
        row["check_in_id"] = check_in_id
        return enforce_blocker_description(row)

    def _upload_row(self, user_id: UUID, data: UploadInput) -> dict[str, Any]:
        """Build an upload row, reducing any absolute URL to its storage path."""
        path = get_storage_path(data.file_url, self.storage.bucket)
        if path.startswith("http") or not belongs_to_user(path, str(user_id)):
            raise ValidationError(
                "Upload path is not in the current user's storage folder",
                details={"file_url": data.file_url},
            )
        return {
            "user_id": user_id,
            "file_name": data.file_name,
            "file_url": path,
            "file_type": data.file_type,
            "file_size": data.file_size,
            "what_am_i_looking_at": normalize_optional_text(data.what_am_i_looking_at),
            "why_does_this_matter": normalize_optional_text(data.why_does_this_matter),
        }
