from datetime import date, timedelta

from buildlog.shared.models.enums import ProjectStatus
from buildlog.shared.repositories.check_in_repository import CheckInRepository
from buildlog.shared.repositories.project_repository import ProjectRepository
from buildlog.shared.repositories.user_repository import UserRepository
from buildlog.shared.models.enums import CheckInType
from buildlog.shared.services.dashboard_service import (
    DashboardService,
    compute_streak,
    display_name_for,
)


TODAY = date(2024, 6, 10)


def test_display_name_is_email_local_part():
    assert display_name_for("jane.doe@example.com") == "jane.doe"


def test_streak_counts_back_from_today():
    active = {TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2)}

    assert compute_streak(active, TODAY) == 3


def test_streak_may_end_yesterday():
    active = {TODAY - timedelta(days=1), TODAY - timedelta(days=2)}

    assert compute_streak(active, TODAY) == 2


def test_streak_breaks_on_gap():
    active = {TODAY, TODAY - timedelta(days=2)}

    assert compute_streak(active, TODAY) == 1
    assert compute_streak({TODAY - timedelta(days=2)}, TODAY) == 0
    assert compute_streak(set(), TODAY) == 0


async def test_summary_counts(db_session):
    user = await UserRepository(db_session).create(email="jane@example.com", password_hash="x")
    projects = ProjectRepository(db_session)
    await projects.create(user_id=user.id, name="A", status=ProjectStatus.ACTIVE)
    await projects.create(user_id=user.id, name="B", status=ProjectStatus.ACTIVE)
    await projects.create(user_id=user.id, name="C", status=ProjectStatus.COMPLETED)
    check_ins = CheckInRepository(db_session)
    for offset in (0, 0, 1, 3):
        await check_ins.create(
            user_id=user.id,
            check_in_type=CheckInType.MORNING,
            check_in_date=TODAY - timedelta(days=offset),
        )

    summary = await DashboardService(db_session).get_summary(user.id, user.email, today=TODAY)

    assert summary["display_name"] == "jane"
    assert summary["project_counts"] == {"active": 2, "paused": 0, "completed": 1}
    assert summary["total_projects"] == 3
    assert summary["total_check_ins"] == 4
    assert summary["current_streak"] == 2
    assert summary["last_check_in_date"] == TODAY


async def test_dashboard_endpoint(client, auth_headers):
    response = await client.get("/dashboard", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["display_name"] == "builder"
    assert body["total_projects"] == 0
    assert body["current_streak"] == 0
    assert body["last_check_in_date"] is None
