"""
User Entity Model

Represents a registered journal owner. Every other table is scoped by
``user_id``.

Model Hierarchy:
================
    User
       ├── projects (Project[])
       ├── check_ins (CheckIn[])
       └── settings (UserSettings, 0..1)

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "maker@example.com"                                       │
│ password_hash    │ "$2b$12$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buildlog.shared.models.base import Base, TimestampMixin, UUIDType


if TYPE_CHECKING:
    from buildlog.shared.models.project import Project
    from buildlog.shared.models.check_in import CheckIn


class User(Base, TimestampMixin):
    """
    User model representing a registered journal owner.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Email address (unique, indexed); default notification address
        password_hash: Bcrypt hashed password
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Email address - used for login
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    projects: Mapped[list["Project"]] = relationship(
        "Project",
        back_populates="user",
        passive_deletes=True,
    )

    check_ins: Mapped[list["CheckIn"]] = relationship(
        "CheckIn",
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
