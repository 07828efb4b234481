import uuid

from sqlalchemy.exc import SQLAlchemyError

from conftest import create_project


async def stage_file(client, headers, name="shot.png", content_type="image/png", data=b"png-bytes"):
    response = await client.post(
        "/uploads",
        files=[("files", (name, data, content_type))],
        headers=headers,
    )
    assert response.status_code == 200, response.text
    return response.json()["uploaded"][0]


def upload_payload(staged: dict, **captions) -> dict:
    return {
        "file_name": staged["file_name"],
        "file_url": staged["file_url"],
        "file_type": staged["file_type"],
        "file_size": staged["file_size"],
        **captions,
    }


async def save_check_in(client, headers, **payload):
    response = await client.post("/check-ins", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_type_and_date_follow_local_timestamp(client, auth_headers):
    morning = await save_check_in(client, auth_headers, local_timestamp="2024-03-05T10:59:00")
    midday = await save_check_in(client, auth_headers, local_timestamp="2024-03-05T11:00:00")
    evening = await save_check_in(
        client, auth_headers, local_timestamp="2024-03-05T23:30:00-08:00"
    )

    assert morning["check_in_type"] == "morning"
    assert midday["check_in_type"] == "midday"
    assert evening["check_in_type"] == "evening"
    # Local date, not the UTC date (which would already be the 6th)
    assert evening["check_in_date"] == "2024-03-05"


async def test_explicit_type_and_date_win(client, auth_headers):
    check_in = await save_check_in(
        client,
        auth_headers,
        local_timestamp="2024-03-05T08:00:00",
        check_in_type="evening",
        check_in_date="2024-03-04",
    )

    assert check_in["check_in_type"] == "evening"
    assert check_in["check_in_date"] == "2024-03-04"


async def test_save_with_project_update_and_uploads(client, auth_headers, storage):
    project = await create_project(client, auth_headers)
    staged = await stage_file(client, auth_headers)

    check_in = await save_check_in(
        client,
        auth_headers,
        local_timestamp="2024-03-05T09:00:00",
        general_notes="Fixed login bug",
        day_type="breakthrough",
        project_update={"project_id": project["id"], "is_win": True, "what_worked": "tests"},
        uploads=[upload_payload(staged, what_am_i_looking_at="The green build")],
    )

    assert check_in["project_names"] == ["Widget"]
    assert check_in["win_count"] == 1
    assert check_in["image_count"] == 1
    update = check_in["project_updates"][0]
    assert update["project_name"] == "Widget"
    assert update["blocker_description"] is None
    upload = check_in["uploads"][0]
    assert upload["file_url"] == staged["file_url"]
    assert upload["what_am_i_looking_at"] == "The green build"
    assert upload["display_url"] == f"https://storage.test/signed/{staged['file_url']}?expires=3600"


async def test_absolute_upload_url_is_stored_as_path(client, user):
    path = f"{user['user_id']}/1700000000000_shot.png"

    check_in = await save_check_in(
        client,
        user["headers"],
        uploads=[
            {
                "file_name": "shot.png",
                "file_url": f"https://storage.test/uploads/{path}",
                "file_type": "image/png",
            }
        ],
    )

    assert check_in["uploads"][0]["file_url"] == path


async def test_upload_outside_user_folder_is_rejected(client, auth_headers):
    response = await client.post(
        "/check-ins",
        json={
            "uploads": [
                {
                    "file_name": "shot.png",
                    "file_url": f"{uuid.uuid4()}/1_shot.png",
                    "file_type": "image/png",
                }
            ]
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    listing = await client.get("/check-ins", headers=auth_headers)
    assert listing.json() == []


async def test_blocker_description_is_dropped_unless_blocker(client, auth_headers):
    project = await create_project(client, auth_headers)

    not_blocked = await save_check_in(
        client,
        auth_headers,
        project_update={
            "project_id": project["id"],
            "is_blocker": False,
            "blocker_description": "waiting on API keys",
        },
    )
    blocked = await save_check_in(
        client,
        auth_headers,
        project_update={
            "project_id": project["id"],
            "is_blocker": True,
            "blocker_description": "waiting on API keys",
        },
    )

    assert not_blocked["project_updates"][0]["blocker_description"] is None
    assert blocked["project_updates"][0]["blocker_description"] == "waiting on API keys"
    assert blocked["blocker_count"] == 1


async def test_project_of_another_user_is_not_found(client, auth_headers, other_user):
    project = await create_project(client, other_user["headers"])

    response = await client.post(
        "/check-ins",
        json={"project_update": {"project_id": project["id"]}},
        headers=auth_headers,
    )

    assert response.status_code == 404


async def test_failed_insert_keeps_nothing(client, user, monkeypatch):
    async def broken_create_many(self, rows):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(
        "buildlog.shared.repositories.upload_repository.UploadRepository.create_many",
        broken_create_many,
    )

    response = await client.post(
        "/check-ins",
        json={
            "general_notes": "should not survive",
            "uploads": [
                {
                    "file_name": "shot.png",
                    "file_url": f"{user['user_id']}/1_shot.png",
                    "file_type": "image/png",
                }
            ],
        },
        headers=user["headers"],
    )

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "PERSISTENCE_ERROR"
    assert error["message"].startswith("Failed to save check-in:")

    listing = await client.get("/check-ins", headers=user["headers"])
    assert listing.json() == []


# ═══════════════════════════════════════════════════════════════════════════════
# READ
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_is_newest_first_and_scoped(client, auth_headers, other_user):
    first = await save_check_in(client, auth_headers, general_notes="one")
    second = await save_check_in(client, auth_headers, general_notes="two")
    await save_check_in(client, other_user["headers"], general_notes="not mine")

    listing = await client.get("/check-ins", headers=auth_headers)

    assert [item["id"] for item in listing.json()] == [second["id"], first["id"]]


async def test_detail_of_another_user_is_not_found(client, auth_headers, other_user):
    check_in = await save_check_in(client, other_user["headers"])

    response = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)

    assert response.status_code == 404


async def test_signing_failure_leaves_display_url_empty(client, auth_headers, storage):
    staged = await stage_file(client, auth_headers)
    check_in = await save_check_in(client, auth_headers, uploads=[upload_payload(staged)])

    storage.fail_signing = True
    response = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["uploads"][0]["display_url"] is None


async def test_deleted_project_shows_as_unknown(client, auth_headers):
    project = await create_project(client, auth_headers)
    check_in = await save_check_in(
        client, auth_headers, project_update={"project_id": project["id"], "is_win": True}
    )

    await client.delete(f"/projects/{project['id']}", headers=auth_headers)
    response = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)

    body = response.json()
    assert body["project_updates"][0]["project_name"] == "Unknown project"
    assert body["project_names"] == ["Unknown project"]


# ═══════════════════════════════════════════════════════════════════════════════
# UPDATE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_edit_fields_updates_and_captions(client, auth_headers):
    project = await create_project(client, auth_headers)
    staged = await stage_file(client, auth_headers)
    check_in = await save_check_in(
        client,
        auth_headers,
        general_notes="draft",
        is_post_worthy=True,
        project_update={
            "project_id": project["id"],
            "is_blocker": True,
            "blocker_description": "flaky CI",
        },
        uploads=[upload_payload(staged)],
    )
    update_id = check_in["project_updates"][0]["id"]
    upload_id = check_in["uploads"][0]["id"]

    response = await client.patch(
        f"/check-ins/{check_in['id']}",
        json={
            "general_notes": "final",
            "project_updates": [{"id": update_id, "is_blocker": False, "is_win": True}],
            "upload_captions": [{"id": upload_id, "why_does_this_matter": "proof"}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["general_notes"] == "final"
    assert body["is_post_worthy"] is True
    update = body["project_updates"][0]
    assert update["is_blocker"] is False
    assert update["is_win"] is True
    assert update["blocker_description"] is None
    assert body["uploads"][0]["why_does_this_matter"] == "proof"
    assert body["win_count"] == 1
    assert body["blocker_count"] == 0


async def test_edit_attaches_new_uploads(client, auth_headers):
    check_in = await save_check_in(client, auth_headers)
    staged = await stage_file(client, auth_headers, name="demo.mp4", content_type="video/mp4")

    response = await client.patch(
        f"/check-ins/{check_in['id']}",
        json={"new_uploads": [upload_payload(staged)]},
        headers=auth_headers,
    )

    body = response.json()
    assert len(body["uploads"]) == 1
    assert body["video_count"] == 1


async def test_edit_with_unknown_update_changes_nothing(client, auth_headers):
    check_in = await save_check_in(client, auth_headers, general_notes="original")

    response = await client.patch(
        f"/check-ins/{check_in['id']}",
        json={
            "general_notes": "changed",
            "project_updates": [{"id": str(uuid.uuid4()), "is_win": True}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 404
    detail = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)
    assert detail.json()["general_notes"] == "original"


# ═══════════════════════════════════════════════════════════════════════════════
# DELETE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_delete_removes_rows_and_files(client, auth_headers, storage):
    project = await create_project(client, auth_headers)
    staged = await stage_file(client, auth_headers)
    check_in = await save_check_in(
        client,
        auth_headers,
        project_update={"project_id": project["id"]},
        uploads=[upload_payload(staged)],
    )

    response = await client.delete(f"/check-ins/{check_in['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert storage.removed == [staged["file_url"]]
    detail = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)
    assert detail.status_code == 404


async def test_delete_survives_storage_failure(client, auth_headers, storage):
    staged = await stage_file(client, auth_headers)
    check_in = await save_check_in(client, auth_headers, uploads=[upload_payload(staged)])
    storage.fail_removal = True

    response = await client.delete(f"/check-ins/{check_in['id']}", headers=auth_headers)

    assert response.status_code == 204
    detail = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)
    assert detail.status_code == 404


async def test_delete_single_upload(client, auth_headers, storage):
    first = await stage_file(client, auth_headers, name="a.png")
    second = await stage_file(client, auth_headers, name="b.png")
    check_in = await save_check_in(
        client, auth_headers, uploads=[upload_payload(first), upload_payload(second)]
    )
    upload_id = check_in["uploads"][0]["id"]

    response = await client.delete(
        f"/check-ins/{check_in['id']}/uploads/{upload_id}", headers=auth_headers
    )

    assert response.status_code == 204
    assert storage.removed == [check_in["uploads"][0]["file_url"]]
    detail = await client.get(f"/check-ins/{check_in['id']}", headers=auth_headers)
    assert [upload["id"] for upload in detail.json()["uploads"]] == [check_in["uploads"][1]["id"]]


async def test_delete_unknown_upload_is_not_found(client, auth_headers):
    check_in = await save_check_in(client, auth_headers)

    response = await client.delete(
        f"/check-ins/{check_in['id']}/uploads/{uuid.uuid4()}", headers=auth_headers
    )

    assert response.status_code == 404
