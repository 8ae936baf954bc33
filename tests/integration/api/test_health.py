"""Integration tests for health endpoints."""

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


async def test_liveness(client: AsyncClient):
    response = await client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


async def test_readiness(client: AsyncClient):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"] == {"database": "ok"}


async def test_info(client: AsyncClient):
    response = await client.get("/info")

    assert response.status_code == 200
    assert response.json()["app"] == "TimeScrub API"
