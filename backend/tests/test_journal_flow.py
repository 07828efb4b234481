"""Project → check-in → history → project deletion, end to end."""

from conftest import create_project


async def test_win_survives_project_deletion(client, auth_headers):
    project = await create_project(client, auth_headers, name="Widget")

    response = await client.post(
        "/check-ins",
        json={
            "local_timestamp": "2024-05-01T09:15:00",
            "project_update": {
                "project_id": project["id"],
                "update_text": "Shipped the onboarding flow",
                "is_win": True,
            },
        },
        headers=auth_headers,
    )
    assert response.status_code == 201

    history = (await client.get("/check-ins/history", headers=auth_headers)).json()
    group = history["groups"][0]
    assert group["check_in_date"] == "2024-05-01"
    assert group["win_count"] == 1
    assert group["check_ins"][0]["project_names"] == ["Widget"]

    deleted = await client.delete(f"/projects/{project['id']}", headers=auth_headers)
    assert deleted.status_code == 204

    history = (await client.get("/check-ins/history", headers=auth_headers)).json()
    card = history["groups"][0]["check_ins"][0]
    assert card["project_updates"][0]["project_name"] == "Unknown project"
    assert card["project_updates"][0]["update_text"] == "Shipped the onboarding flow"
    assert history["groups"][0]["win_count"] == 1

    dashboard = (await client.get("/dashboard", headers=auth_headers)).json()
    assert dashboard["total_projects"] == 0
    assert dashboard["total_check_ins"] == 1
