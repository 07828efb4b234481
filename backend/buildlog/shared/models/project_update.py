"""
ProjectUpdate Entity Model

What happened on one project during one check-in.

The update holds a free-text ``update_text`` plus an optional structured
breakdown (problem / what didn't work / what worked / surprise), and two
flags. ``blocker_description`` is only ever stored while ``is_blocker`` is
true.

``project_id`` is deliberately not a foreign key: projects can be deleted
while their updates remain.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buildlog.shared.models.base import Base, TimestampMixin, UUIDType


if TYPE_CHECKING:
    from buildlog.shared.models.check_in import CheckIn


class ProjectUpdate(Base, TimestampMixin):
    """ProjectUpdate model - a check-in's note about one project."""

    __tablename__ = "project_updates"

    id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        primary_key=True,
        default=uuid.uuid4,
    )

    check_in_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        ForeignKey("check_ins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    project_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE TEXT
    # ═══════════════════════════════════════════════════════════════════════════

    update_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    problem: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    what_didnt_work: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    what_worked: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    surprise: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # FLAGS
    # ═══════════════════════════════════════════════════════════════════════════

    is_win: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_blocker: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    blocker_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    check_in: Mapped["CheckIn"] = relationship("CheckIn", back_populates="project_updates")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<ProjectUpdate(id={self.id}, project_id={self.project_id})>"
