import pytest
from httpx import AsyncClient

import app.main as main_module
from app.core.rate_limit import limiter


@pytest.mark.asyncio
async def test_root(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["endpoints"]["projects"] == "/api/projects"


@pytest.mark.asyncio
async def test_health_connected(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == {"status": "connected", "connected": True}
    assert body["uptime"] >= 0
    assert body["timestamp"]


@pytest.mark.asyncio
async def test_health_database_down(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(main_module, "test_mongo_connection", lambda: False)

    response = await client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["database"] == {"status": "disconnected", "connected": False}


@pytest.mark.asyncio
async def test_response_headers(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert "default-src 'self'" in response.headers["content-security-policy"]
    assert len(response.headers["x-request-id"]) == 36


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_uploaded_images_are_served(client: AsyncClient, auth_headers):
    upload = await client.post(
        "/api/projects/upload-image",
        files={"image": ("shot.png", b"\x89PNG\r\n\x1a\nabc", "image/png")},
        headers=auth_headers,
    )

    served = await client.get(upload.json()["data"]["imageUrl"])

    assert served.status_code == 200
    assert served.content == b"\x89PNG\r\n\x1a\nabc"


@pytest.mark.asyncio
async def test_default_rate_limit_covers_api_only(client: AsyncClient):
    """The general limit counts /api requests; the root info route is not throttled"""
    limiter.enabled = True
    limiter.reset()
    try:
        root_statuses = {(await client.get("/")).status_code for _ in range(101)}
        health_statuses = [(await client.get("/api/health")).status_code for _ in range(101)]
    finally:
        limiter.enabled = False
        limiter.reset()

    assert root_statuses == {200}
    assert health_statuses[:100] == [200] * 100
    assert health_statuses[100] == 429
    assert health_statuses.count(429) == 1
