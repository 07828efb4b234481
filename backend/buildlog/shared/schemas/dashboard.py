"""
Dashboard Schemas
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel


class DashboardResponse(BaseModel):
    """Home screen summary."""

    display_name: str
    email: str
    project_counts: dict[str, int]
    total_projects: int
    total_check_ins: int
    current_streak: int
    last_check_in_date: Optional[date] = None
