"""
Check-in Handler

Endpoints for composing, browsing and editing check-ins.

Routes:
=======
    POST   /check-ins                              → save a check-in (one transaction)
    GET    /check-ins/prompts                      → reflection prompts for the composer
    GET    /check-ins                              → latest check-ins, newest first
    GET    /check-ins/history                      → latest check-ins grouped by date
    GET    /check-ins/{id}                         → detail view with display URLs
    PATCH  /check-ins/{id}                         → edit fields, updates, captions
    DELETE /check-ins/{id}                         → delete with children and files
    DELETE /check-ins/{id}/uploads/{upload_id}     → detach and delete one upload

Static paths (/prompts, /history) are registered before /{id} so they
are not captured by the path parameter.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_check_in_service, get_prompt_service
from buildlog.shared.models.check_in import CheckIn
from buildlog.shared.models.enums import DayType, PromptCategory
from buildlog.shared.schemas.check_in import (
    CheckInCreate,
    CheckInDateGroup,
    CheckInHistoryResponse,
    CheckInPatch,
    CheckInResponse,
    ProjectUpdateResponse,
    PromptsResponse,
    UploadResponse,
)
from buildlog.shared.services.check_in_service import (
    UNKNOWN_PROJECT,
    CheckInService,
    count_badges,
)
from buildlog.shared.services.prompt_service import MAX_PROMPTS, PromptService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSE BUILDERS
# ═══════════════════════════════════════════════════════════════════════════════


def _build_check_in_response(
    check_in: CheckIn,
    project_names: dict[UUID, str],
    display_urls: Optional[dict[UUID, Optional[str]]] = None,
) -> CheckInResponse:
    """
    Build CheckInResponse from an ORM object.

    Args:
        check_in: Check-in with children loaded
        project_names: project_id → name (from CheckInService.project_names)
        display_urls: upload_id → URL; only passed for the detail view
    """
    display_urls = display_urls or {}

    updates = [
        ProjectUpdateResponse(
            id=str(update.id),
            project_id=str(update.project_id),
            project_name=project_names.get(update.project_id, UNKNOWN_PROJECT),
            update_text=update.update_text,
            problem=update.problem,
            what_didnt_work=update.what_didnt_work,
            what_worked=update.what_worked,
            surprise=update.surprise,
            is_win=update.is_win,
            is_blocker=update.is_blocker,
            blocker_description=update.blocker_description,
        )
        for update in check_in.project_updates
    ]

    uploads = [
        UploadResponse(
            id=str(upload.id),
            file_name=upload.file_name,
            file_url=upload.file_url,
            file_type=upload.file_type,
            file_size=upload.file_size,
            what_am_i_looking_at=upload.what_am_i_looking_at,
            why_does_this_matter=upload.why_does_this_matter,
            display_url=display_urls.get(upload.id),
            created_at=upload.created_at,
        )
        for upload in check_in.uploads
    ]

    names: list[str] = []
    for update in updates:
        if update.project_name not in names:
            names.append(update.project_name)

    return CheckInResponse(
        id=str(check_in.id),
        check_in_type=check_in.check_in_type,
        check_in_date=check_in.check_in_date,
        general_notes=check_in.general_notes,
        day_type=check_in.day_type,
        breakthroughs=check_in.breakthroughs,
        is_video_worthy=check_in.is_video_worthy,
        is_post_worthy=check_in.is_post_worthy,
        in_my_own_words=check_in.in_my_own_words,
        project_updates=updates,
        uploads=uploads,
        project_names=names,
        created_at=check_in.created_at,
        updated_at=check_in.updated_at,
        **count_badges(check_in),
    )


async def _build_detail_response(
    service: CheckInService,
    check_in: CheckIn,
    user_id: UUID,
) -> CheckInResponse:
    names = await service.project_names([check_in], user_id)
    urls = await service.display_urls(check_in)
    return _build_check_in_response(check_in, names, urls)


# ═══════════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
async def create_check_in(
    request: CheckInCreate,
    current_user: CurrentUser,
    service: CheckInService = Depends(get_check_in_service),
):
    """
    Save a check-in with its project update and uploads.

    Raises:
        400: Upload path outside the user's folder
        404: Referenced project not found
        500: Save failed (nothing is persisted)
    """
    user_id = UUID(current_user["user_id"])
    check_in = await service.create_check_in(user_id, request)
    return await _build_detail_response(service, check_in, user_id)


@router.get("/prompts", response_model=PromptsResponse)
async def get_prompts(
    current_user: CurrentUser,
    day_type: Optional[DayType] = Query(None),
    category: Optional[PromptCategory] = Query(None),
    limit: int = Query(MAX_PROMPTS, ge=1, le=MAX_PROMPTS),
    service: PromptService = Depends(get_prompt_service),
):
    """Shuffled reflection prompts, filtered by day type or category."""
    prompts, categories = service.pick(day_type=day_type, category=category, limit=limit)
    return PromptsResponse(prompts=prompts, categories=categories)


@router.get("", response_model=list[CheckInResponse])
async def list_check_ins(
    current_user: CurrentUser,
    limit: Optional[int] = Query(None, ge=1, le=200),
    service: CheckInService = Depends(get_check_in_service),
):
    """Latest check-ins, newest first."""
    user_id = UUID(current_user["user_id"])
    check_ins = await service.list_check_ins(user_id, limit=limit)
    names = await service.project_names(check_ins, user_id)
    return [_build_check_in_response(check_in, names) for check_in in check_ins]


@router.get("/history", response_model=CheckInHistoryResponse)
async def get_history(
    current_user: CurrentUser,
    limit: Optional[int] = Query(None, ge=1, le=200),
    service: CheckInService = Depends(get_check_in_service),
):
    """Latest check-ins grouped by calendar date, newest date first."""
    user_id = UUID(current_user["user_id"])
    groups = await service.get_history(user_id, limit=limit)
    names = await service.project_names(
        [check_in for _, check_ins in groups for check_in in check_ins], user_id
    )

    response_groups = []
    total = 0
    for group_date, check_ins in groups:
        cards = [_build_check_in_response(check_in, names) for check_in in check_ins]
        total += len(cards)
        response_groups.append(
            CheckInDateGroup(
                check_in_date=group_date,
                check_ins=cards,
                win_count=sum(card.win_count for card in cards),
                blocker_count=sum(card.blocker_count for card in cards),
            )
        )

    return CheckInHistoryResponse(groups=response_groups, total=total)


@router.get("/{check_in_id}", response_model=CheckInResponse)
async def get_check_in(
    check_in_id: UUID,
    current_user: CurrentUser,
    service: CheckInService = Depends(get_check_in_service),
):
    """Detail view with display URLs for each upload."""
    user_id = UUID(current_user["user_id"])
    check_in = await service.get_check_in(check_in_id, user_id)
    return await _build_detail_response(service, check_in, user_id)


@router.patch("/{check_in_id}", response_model=CheckInResponse)
async def update_check_in(
    check_in_id: UUID,
    request: CheckInPatch,
    current_user: CurrentUser,
    service: CheckInService = Depends(get_check_in_service),
):
    """
    Edit a check-in.

    Raises:
        404: Check-in, project update or upload not found
        500: Save failed (nothing is persisted)
    """
    user_id = UUID(current_user["user_id"])
    check_in = await service.update_check_in(check_in_id, user_id, request)
    return await _build_detail_response(service, check_in, user_id)


@router.delete("/{check_in_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_check_in(
    check_in_id: UUID,
    current_user: CurrentUser,
    service: CheckInService = Depends(get_check_in_service),
):
    """Delete a check-in, its children and (best-effort) its stored files."""
    await service.delete_check_in(check_in_id, UUID(current_user["user_id"]))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{check_in_id}/uploads/{upload_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_upload(
    check_in_id: UUID,
    upload_id: UUID,
    current_user: CurrentUser,
    service: CheckInService = Depends(get_check_in_service),
):
    """Remove one upload from a check-in."""
    await service.delete_upload(check_in_id, upload_id, UUID(current_user["user_id"]))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
