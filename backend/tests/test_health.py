async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "buildlog"


async def test_live(client):
    response = await client.get("/live")

    assert response.json() == {"status": "alive"}


async def test_ready_reports_unavailable_database(client, monkeypatch):
    async def failing_check():
        return False

    monkeypatch.setattr("buildlog.api.handlers.health_handler.check_db", failing_check)

    response = await client.get("/ready")

    assert response.status_code == 503


async def test_responses_carry_request_id(client):
    generated = await client.get("/live")
    echoed = await client.get("/live", headers={"X-Request-ID": "req-123"})

    assert len(generated.headers["X-Request-ID"]) == 32
    assert echoed.headers["X-Request-ID"] == "req-123"


async def test_error_envelope_always_has_details(client):
    response = await client.post("/auth/login", json={"email": "not-an-email"})

    error = response.json()["error"]
    assert set(error) == {"code", "message", "details"}
    assert error["details"]["errors"]
