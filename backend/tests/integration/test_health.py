"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from pet_api.main import app


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/health", "/"])
async def test_health_check_returns_200(path: str):
    """Health endpoint should return 200 with status, service, and version."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(path)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "Pet Management API"
    assert "version" in data
    assert "environment" in data
