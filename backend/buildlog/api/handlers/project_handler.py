"""
Project Handler

CRUD endpoints for tracked projects.

Routes:
=======
    GET    /projects            → list (newest first, optional ?status=)
    POST   /projects            → create
    GET    /projects/{id}       → read one
    PATCH  /projects/{id}       → edit the fields present in the body
    DELETE /projects/{id}       → hard delete
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_project_service
from buildlog.shared.models.enums import ProjectStatus
from buildlog.shared.models.project import Project
from buildlog.shared.schemas.project import ProjectCreate, ProjectPatch, ProjectResponse
from buildlog.shared.services.project_service import ProjectService
from buildlog.shared.utils.text import join_comma_list


router = APIRouter()


def _build_project_response(project: Project) -> ProjectResponse:
    """Helper to build ProjectResponse from ORM object."""
    technologies = list(project.technologies or [])
    return ProjectResponse(
        id=str(project.id),
        name=project.name,
        description=project.description,
        goals=project.goals,
        target_audience=project.target_audience,
        content_angle=project.content_angle,
        technologies=technologies,
        technologies_text=join_comma_list(technologies),
        target_completion_date=project.target_completion_date,
        status=project.status,
        progress_percentage=project.progress_percentage,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    current_user: CurrentUser,
    project_status: Optional[ProjectStatus] = Query(None, alias="status"),
    service: ProjectService = Depends(get_project_service),
):
    """List the user's projects, newest first."""
    projects = await service.list_projects(UUID(current_user["user_id"]), status=project_status)
    return [_build_project_response(project) for project in projects]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: ProjectCreate,
    current_user: CurrentUser,
    service: ProjectService = Depends(get_project_service),
):
    """
    Create a project.

    Raises:
        400: If the name is blank
    """
    project = await service.create_project(
        UUID(current_user["user_id"]),
        name=request.name,
        description=request.description,
        goals=request.goals,
        target_audience=request.target_audience,
        content_angle=request.content_angle,
        technologies=request.technologies,
        target_completion_date=request.target_completion_date,
    )
    return _build_project_response(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    current_user: CurrentUser,
    service: ProjectService = Depends(get_project_service),
):
    """Get one project."""
    project = await service.get_project(project_id, UUID(current_user["user_id"]))
    return _build_project_response(project)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: ProjectPatch,
    current_user: CurrentUser,
    service: ProjectService = Depends(get_project_service),
):
    """
    Edit a project. Fields absent from the body are left alone.

    Raises:
        400: Blank name, null status or progress
        404: Project not found
    """
    project = await service.update_project(
        project_id,
        UUID(current_user["user_id"]),
        request.model_dump(exclude_unset=True),
    )
    return _build_project_response(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    current_user: CurrentUser,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project. Check-ins that mention it keep their updates."""
    await service.delete_project(project_id, UUID(current_user["user_id"]))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
