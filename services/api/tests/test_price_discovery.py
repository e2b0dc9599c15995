"""Tests for price discovery search (endpoint + service)."""

import pytest
import redis.asyncio as redis
from httpx import AsyncClient

from app.services import price_discovery
from app.services.price_discovery import PRICE_CATALOGUE, search_prices, search_prices_cached


@pytest.mark.asyncio
async def test_search_rice_returns_single_entry(client: AsyncClient):
    response = await client.get("/api/v1/price-discovery/search", params={"q": "rice"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["total"] == 1
    assert len(data["data"]) == 1

    rice = data["data"][0]
    assert rice["id"] == "1"
    assert rice["commodity"] == "Rice"
    assert rice["currentPrice"] == 2000
    assert rice["priceRange"] == {"min": 1800, "max": 2200, "modal": 2000}
    assert rice["volatility"] == 5.2
    assert rice["sources"] == ["AGMARKNET"]
    assert "lastUpdated" in rice


@pytest.mark.asyncio
async def test_search_is_case_insensitive(client: AsyncClient):
    response = await client.get("/api/v1/price-discovery/search", params={"q": "RiCe"})
    assert [item["commodity"] for item in response.json()["data"]] == ["Rice"]


@pytest.mark.asyncio
async def test_search_substring_matches_multiple(client: AsyncClient):
    response = await client.get("/api/v1/price-discovery/search", params={"q": "to"})
    data = response.json()
    assert [item["commodity"] for item in data["data"]] == ["Potato", "Tomato"]
    assert data["total"] == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"q": ""}])
async def test_search_without_query_returns_all(client: AsyncClient, params: dict):
    response = await client.get("/api/v1/price-discovery/search", params=params)
    data = response.json()
    assert data["total"] == 9
    assert [item["id"] for item in data["data"]] == [str(i) for i in range(1, 10)]


@pytest.mark.asyncio
async def test_search_non_matching_returns_empty(client: AsyncClient):
    response = await client.get("/api/v1/price-discovery/search", params={"q": "saffron"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [], "total": 0}


def test_catalogue_modal_equals_current_price():
    for item in PRICE_CATALOGUE:
        assert item.price_range.modal == item.current_price
        assert item.price_range.min <= item.current_price <= item.price_range.max


def test_search_prices_does_not_expose_catalogue_list():
    results = search_prices(None)
    results.clear()
    assert len(search_prices(None)) == 9


@pytest.mark.asyncio
async def test_cached_search_uses_cache_hit(monkeypatch: pytest.MonkeyPatch):
    cached_record = PRICE_CATALOGUE[3].model_dump(mode="json", by_alias=True)

    async def fake_get(query: str):
        assert query == "anything"
        return [cached_record]

    async def fake_set(query: str, records):
        raise AssertionError("cache hit must not write back")

    monkeypatch.setattr(price_discovery, "get_price_search_cache", fake_get)
    monkeypatch.setattr(price_discovery, "set_price_search_cache", fake_set)

    results = await search_prices_cached("anything")
    assert [item.commodity for item in results] == ["Onion"]


@pytest.mark.asyncio
async def test_cached_search_writes_on_miss(monkeypatch: pytest.MonkeyPatch):
    written: dict = {}

    async def fake_get(query: str):
        return None

    async def fake_set(query: str, records):
        written[query] = records

    monkeypatch.setattr(price_discovery, "get_price_search_cache", fake_get)
    monkeypatch.setattr(price_discovery, "set_price_search_cache", fake_set)

    results = await search_prices_cached("wheat")
    assert [item.commodity for item in results] == ["Wheat"]
    assert written["wheat"][0]["commodity"] == "Wheat"
    assert written["wheat"][0]["currentPrice"] == 2500


@pytest.mark.asyncio
async def test_cached_search_falls_through_on_redis_errors(monkeypatch: pytest.MonkeyPatch):
    async def broken_get(query: str):
        raise redis.ConnectionError("redis down")

    async def broken_set(query: str, records):
        raise redis.ConnectionError("redis down")

    monkeypatch.setattr(price_discovery, "get_price_search_cache", broken_get)
    monkeypatch.setattr(price_discovery, "set_price_search_cache", broken_set)

    results = await search_prices_cached("maize")
    assert [item.commodity for item in results] == ["Maize"]


@pytest.mark.asyncio
async def test_cached_search_discards_malformed_payload(monkeypatch: pytest.MonkeyPatch):
    async def fake_get(query: str):
        return [{"id": "1", "commodity": "Rice"}]

    async def fake_set(query: str, records):
        return None

    monkeypatch.setattr(price_discovery, "get_price_search_cache", fake_get)
    monkeypatch.setattr(price_discovery, "set_price_search_cache", fake_set)

    results = await search_prices_cached("cotton")
    assert [item.commodity for item in results] == ["Cotton"]


@pytest.mark.asyncio
async def test_whole_prices_serialize_as_integers(client: AsyncClient):
    response = await client.get("/api/v1/price-discovery/search", params={"q": "wheat"})
    body = response.text
    assert '"currentPrice":2500,' in body
    assert '"priceRange":{"min":2300,"max":2700,"modal":2500}' in body
    assert '"volatility":3.8' in body
