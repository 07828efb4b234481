"""
Project Entity Model

A build or initiative the user is tracking in public.

SAMPLE PROJECT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                     │ 550e8400-e29b-41d4-a716-446655440000                │
│ user_id                │ 660e8400-e29b-41d4-a716-446655440000                │
│ name                   │ "SaaS Analytics Dashboard"                          │
│ technologies           │ ["Next.js", "Postgres"]                             │
│ status                 │ "active"                                            │
│ progress_percentage    │ 40                                                  │
│ target_completion_date │ 2024-06-30                                          │
└──────────────────────────────────────────────────────────────────────────────┘

Deleting a project removes only this row. Project updates that referenced
it keep the dangling ``project_id`` and render as "Unknown project".
"""

from datetime import date
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import CheckConstraint, Date, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buildlog.shared.models.base import Base, StringList, TimestampMixin, UUIDType
from buildlog.shared.models.enums import ProjectStatus


if TYPE_CHECKING:
    from buildlog.shared.models.user import User


class Project(Base, TimestampMixin):
    """
    Project model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner
        name: Required display name
        description, goals, target_audience, content_angle: Optional free text
        technologies: Optional list of technology names
        target_completion_date: Optional due date
        status: active / paused / completed
        progress_percentage: 0-100
    """

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "progress_percentage >= 0 AND progress_percentage <= 100",
            name="ck_projects_progress_range",
        ),
    )

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
    # PROJECT BASICS
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    goals: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT STRATEGY
    # ═══════════════════════════════════════════════════════════════════════════

    target_audience: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content_angle: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    technologies: Mapped[Optional[list[str]]] = mapped_column(StringList, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROGRESS
    # ═══════════════════════════════════════════════════════════════════════════

    target_completion_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    status: Mapped[ProjectStatus] = mapped_column(
        SQLEnum(
            ProjectStatus,
            name="projectstatus",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=ProjectStatus.ACTIVE,
        index=True,
    )

    progress_percentage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship("User", back_populates="projects")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Project(id={self.id}, name={self.name!r}, status={self.status})>"
