"""CORS policy applied to every route."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from src.portfolio.core.config import Settings
from src.portfolio.main import create_app

pytestmark = pytest.mark.integration

SITE_ORIGIN = "https://maviya.dev"

PREFLIGHT_HEADERS = {
    "Origin": SITE_ORIGIN,
    "Access-Control-Request-Method": "POST",
    "Access-Control-Request-Headers": "content-type",
}


@pytest.fixture
async def restricted_client(
    settings: Settings, engine: AsyncEngine
) -> AsyncGenerator[AsyncClient]:
    restricted = settings.model_copy(update={"cors_origins": [SITE_ORIGIN]})
    app = create_app(settings=restricted, engine=engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def test_preflight_allows_any_origin_without_credentials(client: AsyncClient) -> None:
    response = await client.options("/projects", headers=PREFLIGHT_HEADERS)

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]
    assert "access-control-allow-credentials" not in response.headers


async def test_simple_request_carries_wildcard_origin(client: AsyncClient) -> None:
    response = await client.get("/projects", headers={"Origin": SITE_ORIGIN})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers


async def test_explicit_origins_enable_credentials(restricted_client: AsyncClient) -> None:
    response = await restricted_client.options("/projects", headers=PREFLIGHT_HEADERS)

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == SITE_ORIGIN
    assert response.headers["access-control-allow-credentials"] == "true"


async def test_unlisted_origin_rejected(restricted_client: AsyncClient) -> None:
    headers = {**PREFLIGHT_HEADERS, "Origin": "https://elsewhere.example"}

    response = await restricted_client.options("/projects", headers=headers)

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
