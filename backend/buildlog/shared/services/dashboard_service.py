"""
Dashboard Service

Summary numbers for the home screen: greeting name, project counts by
status, total check-ins and the current check-in streak.

Streak Rule:
============
Consecutive calendar days with at least one check-in, counted backwards
from today. A streak that ended yesterday is still current (today's
check-in may not be written yet); a gap of two days resets it to 0.
"""

from datetime import date, datetime, timedelta
from typing import Any, Optional
from uuid import UUID
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.config.settings import settings
from buildlog.shared.repositories.check_in_repository import CheckInRepository
from buildlog.shared.repositories.project_repository import ProjectRepository


def display_name_for(email: str) -> str:
    """Greeting name: the local part of the email address."""
    return email.split("@", 1)[0]


def compute_streak(active_dates: set[date], today: date) -> int:
    """
    Count consecutive active days ending today or yesterday.

    Example:
        compute_streak({date(2024, 1, 1), date(2024, 1, 2)}, date(2024, 1, 3))  # 2
    """
    if today in active_dates:
        cursor = today
    elif today - timedelta(days=1) in active_dates:
        cursor = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while cursor in active_dates:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


class DashboardService:
    """Service for the home screen summary."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.projects = ProjectRepository(session)
        self.check_ins = CheckInRepository(session)

    async def get_summary(
        self,
        user_id: UUID,
        email: str,
        today: Optional[date] = None,
    ) -> dict[str, Any]:
        """
        Build the dashboard summary.

        Args:
            user_id: Requesting user
            email: Account email (for the greeting)
            today: Reference date (default: today in DEFAULT_TIMEZONE)
        """
        today = today or datetime.now(ZoneInfo(settings.DEFAULT_TIMEZONE)).date()

        status_counts = await self.projects.count_by_status(user_id)
        active_dates = await self.check_ins.activity_dates(user_id)
        total_check_ins = await self.check_ins.count(filters={"user_id": user_id})

        return {
            "display_name": display_name_for(email),
            "email": email,
            "project_counts": {status.value: total for status, total in status_counts.items()},
            "total_projects": sum(status_counts.values()),
            "total_check_ins": total_check_ins,
            "current_streak": compute_streak(active_dates, today),
            "last_check_in_date": max(active_dates) if active_dates else None,
        }
