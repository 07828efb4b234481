from conftest import register


async def test_register_returns_token_and_user(client):
    response = await client.post(
        "/auth/register",
        json={"email": "Maker@Example.com", "password": "password123"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "maker@example.com"
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["expires_in"] > 0


async def test_register_duplicate_email_conflicts(client):
    await register(client, "maker@example.com")

    response = await client.post(
        "/auth/register",
        json={"email": "MAKER@example.com", "password": "password123"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_register_short_password_is_rejected(client):
    response = await client.post(
        "/auth/register",
        json={"email": "maker@example.com", "password": "short"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_login_round_trip(client):
    await register(client, "maker@example.com", password="password123")

    response = await client.post(
        "/auth/login",
        json={"email": "maker@example.com", "password": "password123"},
    )

    assert response.status_code == 200
    token = response.json()["access_token"]

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "maker@example.com"


async def test_login_wrong_password(client):
    await register(client, "maker@example.com", password="password123")

    response = await client.post(
        "/auth/login",
        json={"email": "maker@example.com", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


async def test_protected_route_requires_token(client):
    response = await client.get("/projects")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_protected_route_rejects_garbage_token(client):
    response = await client.get("/projects", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


async def test_login_ignores_email_case(client):
    await register(client, "Maker@Example.com", password="password123")

    response = await client.post(
        "/auth/login",
        json={"email": " MAKER@example.com", "password": "password123"},
    )

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "maker@example.com"
