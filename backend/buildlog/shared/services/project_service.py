"""
Project Service

Business logic for the project manager: list, create, read, edit, delete.

Form Normalization:
===================
Projects are edited through plain text inputs, so every write goes through
the same normalization before touching the database:

    name            → trimmed, required (blank is a ValidationError)
    free text       → trimmed, "" becomes NULL
    technologies    → "React, ,Postgres " becomes ["React", "Postgres"]
                      (an empty result is stored as NULL)

Validation happens before any query is issued.
"""

from datetime import date
from typing import Any, Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.shared.core.exceptions import ProjectNotFoundError, ValidationError
from buildlog.shared.core.logging import get_logger
from buildlog.shared.models.enums import ProjectStatus
from buildlog.shared.models.project import Project
from buildlog.shared.repositories.project_repository import ProjectRepository
from buildlog.shared.utils.text import normalize_optional_text, parse_comma_list

logger = get_logger(__name__)


# Free-text columns where "" is stored as NULL
TEXT_FIELDS = ("description", "goals", "target_audience", "content_angle")


def normalize_technologies(value: Union[str, list[str], None]) -> Optional[list[str]]:
    """Parse the technologies input; an empty result is None."""
    return parse_comma_list(value) or None


def require_name(name: Optional[str]) -> str:
    """
    Trim and require a project name.

    Raises:
        ValidationError: If the name is missing or blank
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError("Project name is required", details={"field": "name"})
    return trimmed


class ProjectService:
    """
    Service for project operations.

    All reads and writes are scoped to the requesting user; another user's
    project behaves exactly like a missing one.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ProjectRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_projects(
        self,
        user_id: UUID,
        status: Optional[ProjectStatus] = None,
    ) -> list[Project]:
        """List the user's projects, newest first."""
        return await self.repo.list_for_user(user_id, status=status)

    async def get_project(self, project_id: UUID, user_id: UUID) -> Project:
        """
        Get one of the user's projects.

        Raises:
            ProjectNotFoundError: If missing or owned by another user
        """
        project = await self.repo.get_for_user(project_id, user_id)
        if not project:
            raise ProjectNotFoundError(str(project_id))
        return project

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_project(
        self,
        user_id: UUID,
        *,
        name: Optional[str],
        description: Optional[str] = None,
        goals: Optional[str] = None,
        target_audience: Optional[str] = None,
        content_angle: Optional[str] = None,
        technologies: Union[str, list[str], None] = None,
        target_completion_date: Optional[date] = None,
    ) -> Project:
        """
        Create a project. New projects start active at 0%.

        Raises:
            ValidationError: If the name is blank (no query is issued)
        """
        project_name = require_name(name)

        project = await self.repo.create(
            user_id=user_id,
            name=project_name,
            description=normalize_optional_text(description),
            goals=normalize_optional_text(goals),
            target_audience=normalize_optional_text(target_audience),
            content_angle=normalize_optional_text(content_angle),
            technologies=normalize_technologies(technologies),
            target_completion_date=target_completion_date,
            status=ProjectStatus.ACTIVE,
            progress_percentage=0,
        )
        logger.info("Project created", user_id=str(user_id), project_id=str(project.id))
        return project

    async def update_project(
        self,
        project_id: UUID,
        user_id: UUID,
        changes: dict[str, Any],
    ) -> Project:
        """
        Replace the given fields of a project in one flush.

        Args:
            project_id: Project to edit
            user_id: Requesting user
            changes: Only the fields the client sent

        Raises:
            ValidationError: Blank name, null status or out-of-range progress
            ProjectNotFoundError: If missing or owned by another user
        """
        values = self._normalize_changes(changes)
        project = await self.get_project(project_id, user_id)

        project = await self.repo.apply(project, values)
        logger.info(
            "Project updated",
            user_id=str(user_id),
            project_id=str(project_id),
            fields=sorted(values),
        )
        return project

    async def delete_project(self, project_id: UUID, user_id: UUID) -> None:
        """
        Hard delete a project row.

        Project updates referencing it are kept and later render as
        "Unknown project".

        Raises:
            ProjectNotFoundError: If missing or owned by another user
        """
        project = await self.get_project(project_id, user_id)
        await self.repo.delete(project.id)
        logger.info("Project deleted", user_id=str(user_id), project_id=str(project_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _normalize_changes(changes: dict[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}

        for field, value in changes.items():
            if field == "name":
                values["name"] = require_name(value)
            elif field in TEXT_FIELDS:
                values[field] = normalize_optional_text(value)
            elif field == "technologies":
                values["technologies"] = normalize_technologies(value)
            elif field == "status":
                if value is None:
                    raise ValidationError("Status is required", details={"field": "status"})
                values["status"] = ProjectStatus(value)
            elif field == "progress_percentage":
                if value is None or not 0 <= value <= 100:
                    raise ValidationError(
                        "Progress must be between 0 and 100",
                        details={"field": "progress_percentage"},
                    )
                values["progress_percentage"] = value
            elif field == "target_completion_date":
                values["target_completion_date"] = value

        return values
