"""Tests for health, connectivity, banner and unknown-route handling."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns OK with service metadata."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["version"] == "1.0.0"
    assert data["service"] == "Multilingual MandiChallenge Demo"
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_connectivity_endpoint(client: AsyncClient):
    response = await client.get("/api/v1/test")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Frontend-Backend connection working!"
    assert data["timestamp"]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/", "/dashboard", "/prices/rice"])
async def test_non_api_paths_return_server_banner(client: AsyncClient, path: str):
    response = await client.get(path)
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Multilingual MandiChallenge Demo Server"
    assert data["status"] == "Running"
    assert data["endpoints"]["health"] == "/health"
    assert data["endpoints"]["login"] == "POST /api/v1/auth/login"
    assert len(data["demoCredentials"]["examples"]) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/unknown", "/api/v2/price-discovery/search", "/api/"])
async def test_unknown_api_path_returns_404(client: AsyncClient, path: str):
    response = await client.get(path)
    assert response.status_code == 404
    assert response.json() == {"error": "API endpoint not found"}


@pytest.mark.asyncio
async def test_unknown_api_method_returns_404(client: AsyncClient):
    """A known API path with an unsupported method is still an unknown endpoint."""
    response = await client.post("/api/v1/test", json={})
    assert response.status_code == 404
    assert response.json() == {"error": "API endpoint not found"}

    response = await client.delete("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "API endpoint not found"}
