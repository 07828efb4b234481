"""
CheckIn Entity Model

A journal entry for one time-of-day slot. Users may write any number of
check-ins per day; each covers at most one project.

Model Hierarchy:
================
    CheckIn
       ├── project_updates (ProjectUpdate[])
       └── uploads (Upload[])

SAMPLE CHECK-IN RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ check_in_type    │ "evening"                                                 │
│ check_in_date    │ 2024-01-15                                                │
│ general_notes    │ "Finally got the webhook retries working..."             │
│ day_type         │ "breakthrough"                                            │
│ is_video_worthy  │ true                                                      │
│ is_post_worthy   │ false                                                     │
│ in_my_own_words  │ "It was a one-line config change. Of course."            │
└──────────────────────────────────────────────────────────────────────────────┘

Children are loaded with ``lazy="selectin"`` so they are always available
inside async sessions without implicit IO.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, Date, Enum as SQLEnum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buildlog.shared.models.base import Base, TimestampMixin, UUIDType
from buildlog.shared.models.enums import CheckInType, DayType


if TYPE_CHECKING:
    from buildlog.shared.models.user import User
    from buildlog.shared.models.project_update import ProjectUpdate
    from buildlog.shared.models.upload import Upload


class CheckIn(Base, TimestampMixin):
    """
    CheckIn model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner
        check_in_type: morning / midday / evening, derived from the local hour
        check_in_date: Local calendar date of the check-in
        general_notes: Free-text brain dump
        day_type: breakthrough / grind / stuck (optional)
        breakthroughs: Optional description of the day's breakthroughs
        is_video_worthy: Flag for repurposing as a video
        is_post_worthy: Flag for repurposing as a post
        in_my_own_words: Verbatim quote for content generation

    Relationships:
        project_updates: Per-project updates written with this check-in
        uploads: Media attached to this check-in
    """

    __tablename__ = "check_ins"

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

    # ═══════════════════════════════════════════════════════════════════════════
    # SLOT
    # ═══════════════════════════════════════════════════════════════════════════

    check_in_type: Mapped[CheckInType] = mapped_column(
        SQLEnum(
            CheckInType,
            name="checkintype",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    check_in_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # REFLECTION
    # ═══════════════════════════════════════════════════════════════════════════

    general_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    day_type: Mapped[Optional[DayType]] = mapped_column(
        SQLEnum(
            DayType,
            name="daytype",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=True,
    )

    breakthroughs: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    in_my_own_words: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT FLAGS
    # ═══════════════════════════════════════════════════════════════════════════

    is_video_worthy: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_post_worthy: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship("User", back_populates="check_ins")

    project_updates: Mapped[list["ProjectUpdate"]] = relationship(
        "ProjectUpdate",
        back_populates="check_in",
        lazy="selectin",
        passive_deletes=True,
        order_by="ProjectUpdate.created_at",
    )

    uploads: Mapped[list["Upload"]] = relationship(
        "Upload",
        back_populates="check_in",
        lazy="selectin",
        passive_deletes=True,
        order_by="Upload.created_at",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<CheckIn(id={self.id}, type={self.check_in_type}, date={self.check_in_date})>"
