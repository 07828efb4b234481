"""
Dashboard Handler

Landing-page summary: greeting, project counts by status and the
check-in streak.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_dashboard_service
from buildlog.shared.schemas.dashboard import DashboardResponse
from buildlog.shared.services.dashboard_service import DashboardService


router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: CurrentUser,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Get the dashboard summary for the current user."""
    summary = await service.get_summary(UUID(current_user["user_id"]), current_user["email"])
    return DashboardResponse(**summary)
