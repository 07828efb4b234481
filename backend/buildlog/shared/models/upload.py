"""
Upload Entity Model

Metadata for a screenshot or recording attached to a check-in. The binary
itself lives in object storage.

SAMPLE UPLOAD RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ file_name             │ "dashboard.png"                                      │
│ file_url              │ "660e8400-.../1705312200000_dashboard.png"           │
│ file_type             │ "image/png"                                          │
│ file_size             │ 482133                                               │
│ what_am_i_looking_at  │ "New onboarding funnel chart"                        │
│ why_does_this_matter  │ "First week with >50% activation"                    │
└──────────────────────────────────────────────────────────────────────────────┘

``file_url`` always holds the bucket-relative storage path. Display URLs
(public or signed) are resolved on read and never persisted.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buildlog.shared.models.base import Base, TimestampMixin, UUIDType


if TYPE_CHECKING:
    from buildlog.shared.models.check_in import CheckIn


class Upload(Base, TimestampMixin):
    """Upload model - one stored media file and its captions."""

    __tablename__ = "uploads"

    id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    check_in_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        ForeignKey("check_ins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FILE
    # ═══════════════════════════════════════════════════════════════════════════

    file_name: Mapped[str] = mapped_column(Text, nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_type: Mapped[str] = mapped_column(String(100), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    # ═══════════════════════════════════════════════════════════════════════════
    # CAPTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    what_am_i_looking_at: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    why_does_this_matter: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    check_in: Mapped["CheckIn"] = relationship("CheckIn", back_populates="uploads")

    @property
    def is_image(self) -> bool:
        return self.file_type.startswith("image/")

    @property
    def is_video(self) -> bool:
        return self.file_type.startswith("video/")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Upload(id={self.id}, file_url={self.file_url})>"
