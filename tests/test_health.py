"""Tests for the health endpoints."""

import pytest
from httpx import AsyncClient

from storefront.core.config import settings


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "UP"
    assert data["application"] == settings.PROJECT_NAME
    assert data["version"] == settings.VERSION
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_detailed_health_reports_database(async_client: AsyncClient):
    resp = await async_client.get("/api/health/detailed")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "UP"
    assert data["database"] == {"status": "UP", "dialect": "sqlite"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path, expected", [("ready", "READY"), ("live", "ALIVE")])
async def test_probes(async_client: AsyncClient, path: str, expected: str):
    resp = await async_client.get(f"/api/health/{path}")
    assert resp.status_code == 200
    assert resp.json()["status"] == expected
    assert resp.json()["message"]


@pytest.mark.asyncio
async def test_unknown_route_is_404(async_client: AsyncClient):
    resp = await async_client.get("/api/nowhere")
    assert resp.status_code == 404
