"""
Tests for the session capability check.

In dev mode (no ACCESS_TOKEN) every request passes. With a token configured,
callers must present it as the auth_token cookie or a Bearer header.
"""
import pytest
from httpx import AsyncClient

from jobtracker.config import settings


@pytest.fixture
def access_token(monkeypatch) -> str:
    token = "s3cret-session-token"
    monkeypatch.setattr(settings, "access_token", token)
    return token


@pytest.mark.asyncio
async def test_dev_mode_session(client: AsyncClient):
    response = await client.get("/api/auth/session")

    assert response.status_code == 200
    assert response.json() == {
        "authenticated": True,
        "identity": "dev",
        "dev_mode": True,
    }


@pytest.mark.asyncio
async def test_missing_token_rejected(client: AsyncClient, access_token: str):
    response = await client.get("/api/applications")

    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


@pytest.mark.asyncio
async def test_wrong_token_rejected(client: AsyncClient, access_token: str):
    client.cookies.set("auth_token", "guess")

    response = await client.get("/api/applications")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_cookie_token_accepted(client: AsyncClient, access_token: str):
    client.cookies.set("auth_token", access_token)

    response = await client.get("/api/applications")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_stale_cookie_does_not_shadow_valid_bearer(client: AsyncClient, access_token: str):
    client.cookies.set("auth_token", "expired-token")

    response = await client.get(
        "/api/applications",
        headers={"Authorization": f"Bearer {access_token}"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_bearer_token_accepted(client: AsyncClient, access_token: str):
    response = await client.get(
        "/api/auth/session",
        headers={"Authorization": f"Bearer {access_token}"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["identity"] == "owner"
    assert data["dev_mode"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("path,method", [
    ("/api/applications", "post"),
    ("/api/analytics/statistics", "get"),
    ("/api/generate-bullets", "post"),
])
async def test_every_api_route_is_protected(
    client: AsyncClient,
    access_token: str,
    path: str,
    method: str
):
    if method == "post":
        response = await client.post(path, json={})
    else:
        response = await client.get(path)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient, access_token: str):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_logout_clears_cookie(client: AsyncClient, access_token: str):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Successfully logged out"}
    assert "auth_token=" in response.headers["set-cookie"]
