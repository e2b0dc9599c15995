"""Tests for vendor profile lookup."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_profile_id_matches_path(client: AsyncClient):
    response = await client.get("/api/v1/vendors/profile/abc123")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    profile = data["data"]["profile"]
    assert profile["id"] == "abc123"
    assert profile["name"] == "Demo Vendor"
    assert profile["businessType"] == "trader"
    assert profile["location"] == {"state": "Maharashtra", "district": "Pune", "market": "Pune Mandi"}
    assert profile["secondaryLanguages"] == ["hi", "mr"]
    assert profile["verificationStatus"] == "verified"
    assert profile["trustScore"] == 4.2
    assert profile["tradingHistory"] == {
        "totalTrades": 156,
        "successfulTrades": 148,
        "averageRating": 4.2,
    }


@pytest.mark.asyncio
async def test_profile_is_identical_apart_from_id(client: AsyncClient):
    first = (await client.get("/api/v1/vendors/profile/vendor-1")).json()["data"]["profile"]
    second = (await client.get("/api/v1/vendors/profile/vendor-2")).json()["data"]["profile"]
    assert first.pop("id") == "vendor-1"
    assert second.pop("id") == "vendor-2"
    assert first == second


@pytest.mark.asyncio
async def test_profile_echoes_long_vendor_id(client: AsyncClient):
    vendor_id = "v" * 300
    response = await client.get(f"/api/v1/vendors/profile/{vendor_id}")
    assert response.status_code == 200
    assert response.json()["data"]["profile"]["id"] == vendor_id
