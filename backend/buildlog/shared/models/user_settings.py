"""
UserSettings Entity Model

Brand and audience configuration used for downstream content generation.
Exactly one row per user; ``user_id`` is the upsert key.
"""

from typing import Optional
import uuid

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from buildlog.shared.models.base import Base, StringList, TimestampMixin, UUIDType


class UserSettings(Base, TimestampMixin):
    """
    UserSettings model.

    Attributes:
        user_id: Owner (unique)
        business_name, business_description: What the user is building
        brand_voice: How generated content should sound
        audience_description: Who the content is for
        audience_interests: List of audience interests
        notification_email: Where notifications go (defaults to the account email)
    """

    __tablename__ = "user_settings"

    id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    business_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    business_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    brand_voice: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    audience_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    audience_interests: Mapped[Optional[list[str]]] = mapped_column(StringList, nullable=True)
    notification_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserSettings(user_id={self.user_id})>"
