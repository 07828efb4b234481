# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-01-06 00:00:00

Tables created:
- users: User accounts
- projects: Tracked projects (status, progress, technologies)
- check_ins: Morning/midday/evening journal entries
- project_updates: Per-project notes inside a check-in (no FK to projects,
  so updates survive project deletion)
- uploads: Media attached to check-ins
- user_settings: One business/audience profile per user

Enums created (lowercase values, matching the Python enum values):
- projectstatus: active, paused, completed
- checkintype: morning, midday, evening
- daytype: breakthrough, grind, stuck
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
project_status_enum = postgresql.ENUM(
    "active",
    "paused",
    "completed",
    name="projectstatus",
    create_type=False,
)

check_in_type_enum = postgresql.ENUM(
    "morning",
    "midday",
    "evening",
    name="checkintype",
    create_type=False,
)

day_type_enum = postgresql.ENUM(
    "breakthrough",
    "grind",
    "stuck",
    name="daytype",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute("CREATE TYPE projectstatus AS ENUM ('active', 'paused', 'completed')")
    op.execute("CREATE TYPE checkintype AS ENUM ('morning', 'midday', 'evening')")
    op.execute("CREATE TYPE daytype AS ENUM ('breakthrough', 'grind', 'stuck')")

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        *_timestamps(),
    )

    # Create projects table
    op.create_table(
        "projects",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("goals", sa.Text(), nullable=True),
        sa.Column("target_audience", sa.Text(), nullable=True),
        sa.Column("content_angle", sa.Text(), nullable=True),
        sa.Column("technologies", postgresql.JSONB(), nullable=True),
        sa.Column("target_completion_date", sa.Date(), nullable=True),
        sa.Column(
            "status",
            project_status_enum,
            nullable=False,
            server_default="active",
            index=True,
        ),
        sa.Column("progress_percentage", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint(
            "progress_percentage >= 0 AND progress_percentage <= 100",
            name="ck_projects_progress_range",
        ),
    )

    # Create check_ins table
    op.create_table(
        "check_ins",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("check_in_type", check_in_type_enum, nullable=False),
        sa.Column("check_in_date", sa.Date(), nullable=True, index=True),
        sa.Column("general_notes", sa.Text(), nullable=True),
        sa.Column("day_type", day_type_enum, nullable=True),
        sa.Column("breakthroughs", sa.Text(), nullable=True),
        sa.Column("in_my_own_words", sa.Text(), nullable=True),
        sa.Column("is_video_worthy", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_post_worthy", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    # Create project_updates table
    op.create_table(
        "project_updates",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "check_in_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("check_ins.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("project_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("update_text", sa.Text(), nullable=True),
        sa.Column("problem", sa.Text(), nullable=True),
        sa.Column("what_didnt_work", sa.Text(), nullable=True),
        sa.Column("what_worked", sa.Text(), nullable=True),
        sa.Column("surprise", sa.Text(), nullable=True),
        sa.Column("is_win", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_blocker", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("blocker_description", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # Create uploads table
    op.create_table(
        "uploads",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "check_in_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("check_ins.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("file_name", sa.Text(), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("file_type", sa.String(100), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("what_am_i_looking_at", sa.Text(), nullable=True),
        sa.Column("why_does_this_matter", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # Create user_settings table
    op.create_table(
        "user_settings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
            index=True,
        ),
        sa.Column("business_name", sa.Text(), nullable=True),
        sa.Column("business_description", sa.Text(), nullable=True),
        sa.Column("brand_voice", sa.Text(), nullable=True),
        sa.Column("audience_description", sa.Text(), nullable=True),
        sa.Column("audience_interests", postgresql.JSONB(), nullable=True),
        sa.Column("notification_email", sa.String(255), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("user_settings")
    op.drop_table("uploads")
    op.drop_table("project_updates")
    op.drop_table("check_ins")
    op.drop_table("projects")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS daytype")
    op.execute("DROP TYPE IF EXISTS checkintype")
    op.execute("DROP TYPE IF EXISTS projectstatus")
