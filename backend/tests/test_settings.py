from sqlalchemy import func, select

from buildlog.shared.models import UserSettings


async def test_defaults_before_first_save(client, auth_headers):
    response = await client.get("/settings", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["exists"] is False
    assert body["audience_interests"] == []
    assert body["audience_interests_text"] == ""
    assert body["notification_email"] == "builder@example.com"


async def test_save_is_an_idempotent_upsert(client, auth_headers, session_factory):
    payload = {
        "business_name": "Acme Labs",
        "brand_voice": "",
        "audience_interests": "indie hackers, ,devtools",
        "notification_email": None,
    }

    first = await client.put("/settings", json=payload, headers=auth_headers)
    second = await client.put("/settings", json=payload, headers=auth_headers)

    assert first.json() == second.json()
    body = second.json()
    assert body["exists"] is True
    assert body["business_name"] == "Acme Labs"
    assert body["brand_voice"] is None
    assert body["audience_interests"] == ["indie hackers", "devtools"]
    assert body["audience_interests_text"] == "indie hackers, devtools"
    assert body["notification_email"] == "builder@example.com"

    async with session_factory() as session:
        rows = await session.scalar(select(func.count()).select_from(UserSettings))
    assert rows == 1


async def test_save_replaces_every_field(client, auth_headers):
    await client.put(
        "/settings",
        json={"business_name": "Acme", "notification_email": "news@acme.dev"},
        headers=auth_headers,
    )

    response = await client.put("/settings", json={"brand_voice": "dry"}, headers=auth_headers)

    body = response.json()
    assert body["business_name"] is None
    assert body["brand_voice"] == "dry"
    assert body["notification_email"] == "builder@example.com"


async def test_settings_are_per_user(client, auth_headers, other_user):
    await client.put("/settings", json={"business_name": "Acme"}, headers=auth_headers)

    response = await client.get("/settings", headers=other_user["headers"])

    assert response.json()["exists"] is False
