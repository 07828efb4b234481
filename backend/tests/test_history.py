from datetime import date, datetime, timezone
from types import SimpleNamespace

from conftest import create_project
from buildlog.shared.services.check_in_service import group_check_ins_by_date


def fake_check_in(name, check_in_date=None, created=None):
    return SimpleNamespace(
        name=name,
        check_in_date=check_in_date,
        created_at=created or datetime(2024, 1, 1, 12, tzinfo=timezone.utc),
    )


def test_grouping_orders_dates_newest_first():
    a = fake_check_in("a", date(2024, 1, 2))
    b = fake_check_in("b", date(2024, 1, 3))
    c = fake_check_in("c", date(2024, 1, 2))

    groups = group_check_ins_by_date([b, c, a])

    assert [(day, [item.name for item in items]) for day, items in groups] == [
        (date(2024, 1, 3), ["b"]),
        (date(2024, 1, 2), ["c", "a"]),
    ]


def test_grouping_falls_back_to_created_date():
    legacy = fake_check_in("legacy", None, datetime(2023, 12, 31, 9, tzinfo=timezone.utc))

    groups = group_check_ins_by_date([legacy])

    assert groups[0][0] == date(2023, 12, 31)


async def test_history_endpoint_groups_with_badges(client, auth_headers):
    project = await create_project(client, auth_headers)
    for day, is_win, is_blocker in (
        ("2024-01-02", True, False),
        ("2024-01-02", False, True),
        ("2024-01-03", True, False),
    ):
        response = await client.post(
            "/check-ins",
            json={
                "check_in_date": day,
                "check_in_type": "evening",
                "project_update": {
                    "project_id": project["id"],
                    "is_win": is_win,
                    "is_blocker": is_blocker,
                },
            },
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = await client.get("/check-ins/history", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [group["check_in_date"] for group in body["groups"]] == ["2024-01-03", "2024-01-02"]
    older = body["groups"][1]
    assert len(older["check_ins"]) == 2
    assert older["win_count"] == 1
    assert older["blocker_count"] == 1
    assert older["check_ins"][0]["project_names"] == ["Widget"]


async def test_history_respects_limit(client, auth_headers):
    for day in ("2024-01-01", "2024-01-02", "2024-01-03"):
        await client.post("/check-ins", json={"check_in_date": day}, headers=auth_headers)

    response = await client.get("/check-ins/history", params={"limit": 2}, headers=auth_headers)

    assert response.json()["total"] == 2
