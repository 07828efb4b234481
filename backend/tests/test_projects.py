import uuid

from conftest import create_project

from buildlog.shared.repositories.project_repository import ProjectRepository


async def test_create_project_defaults(client, auth_headers):
    project = await create_project(
        client,
        auth_headers,
        name="  Widget  ",
        technologies="React, ,Postgres ,",
        description="",
    )

    assert project["name"] == "Widget"
    assert project["status"] == "active"
    assert project["progress_percentage"] == 0
    assert project["technologies"] == ["React", "Postgres"]
    assert project["technologies_text"] == "React, Postgres"
    assert project["description"] is None


async def test_create_project_accepts_technology_list(client, auth_headers):
    project = await create_project(client, auth_headers, technologies=["FastAPI", " S3 "])

    assert project["technologies"] == ["FastAPI", "S3"]


async def test_create_project_requires_name(client, auth_headers):
    response = await client.post("/projects", json={"name": "   "}, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["message"] == "Project name is required"
    assert body["error"]["details"] == {"field": "name"}

    listing = await client.get("/projects", headers=auth_headers)
    assert listing.json() == []


async def test_list_projects_newest_first_and_status_filter(client, auth_headers):
    first = await create_project(client, auth_headers, name="First")
    second = await create_project(client, auth_headers, name="Second")
    await client.patch(
        f"/projects/{first['id']}", json={"status": "paused"}, headers=auth_headers
    )

    listing = await client.get("/projects", headers=auth_headers)
    assert [project["id"] for project in listing.json()] == [second["id"], first["id"]]

    paused = await client.get("/projects", params={"status": "paused"}, headers=auth_headers)
    assert [project["name"] for project in paused.json()] == ["First"]


async def test_patch_only_touches_sent_fields(client, auth_headers):
    project = await create_project(client, auth_headers, goals="Ship v1", technologies="Go")

    response = await client.patch(
        f"/projects/{project['id']}",
        json={"progress_percentage": 40, "technologies": "Go, Rust"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["progress_percentage"] == 40
    assert body["technologies"] == ["Go", "Rust"]
    assert body["goals"] == "Ship v1"
    assert body["name"] == "Widget"


async def test_patch_clears_text_with_empty_string(client, auth_headers):
    project = await create_project(client, auth_headers, goals="Ship v1")

    response = await client.patch(
        f"/projects/{project['id']}", json={"goals": ""}, headers=auth_headers
    )

    assert response.json()["goals"] is None


async def test_patch_rejects_out_of_range_progress(client, auth_headers):
    project = await create_project(client, auth_headers)

    response = await client.patch(
        f"/projects/{project['id']}",
        json={"progress_percentage": 101},
        headers=auth_headers,
    )

    assert response.status_code == 422


async def test_patch_rejects_blank_name_and_null_status(client, auth_headers):
    project = await create_project(client, auth_headers)

    blank = await client.patch(
        f"/projects/{project['id']}", json={"name": " "}, headers=auth_headers
    )
    null_status = await client.patch(
        f"/projects/{project['id']}", json={"status": None}, headers=auth_headers
    )

    assert blank.status_code == 400
    assert null_status.status_code == 400


async def test_projects_are_scoped_to_owner(client, auth_headers, other_user):
    project = await create_project(client, auth_headers)

    response = await client.get(f"/projects/{project['id']}", headers=other_user["headers"])
    assert response.status_code == 404

    response = await client.delete(f"/projects/{project['id']}", headers=other_user["headers"])
    assert response.status_code == 404

    listing = await client.get("/projects", headers=other_user["headers"])
    assert listing.json() == []


async def test_delete_project(client, auth_headers):
    project = await create_project(client, auth_headers)

    response = await client.delete(f"/projects/{project['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await client.get(f"/projects/{project['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_repository_delete_of_missing_row(db_session):
    assert await ProjectRepository(db_session).delete(uuid.uuid4()) is False
