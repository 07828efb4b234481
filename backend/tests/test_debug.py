from buildlog.api.main import create_application
from buildlog.config.settings import settings


async def test_debug_report_probes_latest_upload(client, user, storage):
    staged = (
        await client.post(
            "/uploads",
            files=[("files", ("a.png", b"a", "image/png"))],
            headers=user["headers"],
        )
    ).json()["uploaded"][0]
    await client.post(
        "/check-ins",
        json={
            "uploads": [
                {
                    "file_name": staged["file_name"],
                    "file_url": staged["file_url"],
                    "file_type": staged["file_type"],
                }
            ]
        },
        headers=user["headers"],
    )

    response = await client.get("/debug/uploads", headers=user["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == user["user_id"]
    assert body["bucket"] == "uploads"
    assert body["public_bucket"] is False
    assert len(body["recent_uploads"]) == 1
    assert body["storage_objects"][0]["size"] == 1
    assert body["storage_error"] is None
    probe = body["probe"]
    assert probe["storage_path"] == staged["file_url"]
    assert probe["public_url"] == f"https://storage.test/uploads/{staged['file_url']}"
    assert probe["signed_url"].startswith("https://storage.test/signed/")


async def test_debug_report_surfaces_storage_errors(client, auth_headers, storage):
    storage.fail_listing = True

    response = await client.get("/debug/uploads", headers=auth_headers)

    body = response.json()
    assert body["storage_objects"] == []
    assert body["storage_error"].startswith("Failed to list")
    assert body["probe"] is None


def test_debug_routes_hidden_when_disabled(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG_ENDPOINTS_ENABLED", False)

    application = create_application()

    paths = {route.path for route in application.routes}
    assert "/debug/uploads" not in paths
    assert "/check-ins" in paths
