"""
Upload Repository

Metadata rows for media stored in the ``uploads`` bucket.

Common Operations:
==================
- list_recent_for_user()  → Latest upload rows (diagnostics)
- get_for_check_in()      → One upload, scoped to its check-in
- create_many()           → Bulk insert for a check-in save
- delete_row()            → Remove one metadata row
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.models.upload import Upload
from buildlog.shared.repositories.base import BaseRepository


class UploadRepository(BaseRepository[Upload]):
    """Repository for Upload database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Upload, session)

    async def list_recent_for_user(self, user_id: UUID, limit: int = 10) -> list[Upload]:
        """Get the user's most recent upload rows, newest first."""
        result = await self.session.execute(
            select(Upload)
            .where(Upload.user_id == user_id)
            .order_by(Upload.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_for_check_in(self, upload_id: UUID, check_in_id: UUID) -> Optional[Upload]:
        """Get an upload only if it is attached to ``check_in_id``."""
        result = await self.session.execute(
            select(Upload).where(Upload.id == upload_id, Upload.check_in_id == check_in_id)
        )
        return result.scalar_one_or_none()

    async def create_many(self, rows: list[dict]) -> list[Upload]:
        """Bulk-insert upload rows in a single flush."""
        instances = [Upload(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        return instances

    async def delete_row(self, upload_id: UUID) -> None:
        """
        Delete one upload row.

        SQL Generated:
            DELETE FROM uploads WHERE id = '...'
        """
        await self.session.execute(delete(Upload).where(Upload.id == upload_id))
        await self.session.flush()
