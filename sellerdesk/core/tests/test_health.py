"""Tests for health check endpoints."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError


@pytest.mark.asyncio
async def test_health_check_returns_ok(client):
    """Health endpoint should return status ok."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "SellerDesk"
    assert data["version"]


@pytest.mark.asyncio
async def test_health_check_includes_request_id_header(client):
    """Health endpoint should include X-Request-ID in response."""
    response = await client.get("/health")

    assert "X-Request-ID" in response.headers
    assert len(response.headers["X-Request-ID"]) > 0


@pytest.mark.asyncio
async def test_readiness_reports_connected_database(client, mock_db):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"
    mock_db.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_readiness_reports_disconnected_database(client, mock_db):
    """A failing health query reports unhealthy instead of raising."""
    mock_db.execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))

    response = await client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["database"] == "disconnected"
