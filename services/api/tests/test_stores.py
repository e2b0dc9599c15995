"""Tests for the Redis and Postgres stores (no live servers)."""

import pytest
from httpx import AsyncClient

from app.stores import postgres as postgres_store
from app.stores import redis as redis_store


class InMemoryRedis:
    """Implements the two client calls the cache helpers make."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> None:
        self.data[key] = value
        self.ttls[key] = ttl


@pytest.fixture
def fake_redis(monkeypatch: pytest.MonkeyPatch) -> InMemoryRedis:
    client = InMemoryRedis()
    monkeypatch.setattr(redis_store, "_redis", client)
    return client


def test_price_search_key_is_case_insensitive():
    assert redis_store.price_search_key("RiCe") == redis_store.price_search_key("rice") == "price_search:rice"


@pytest.mark.parametrize("query", ["*", "all", "_all", " "])
def test_empty_query_key_differs_from_every_literal_query(query: str):
    assert redis_store.price_search_key("") == redis_store.KEY_PRICE_SEARCH_ALL
    assert redis_store.price_search_key(query) != redis_store.KEY_PRICE_SEARCH_ALL


@pytest.mark.asyncio
async def test_star_query_after_cached_full_search(client: AsyncClient, fake_redis: InMemoryRedis):
    everything = (await client.get("/api/v1/price-discovery/search", params={"q": ""})).json()
    star = (await client.get("/api/v1/price-discovery/search", params={"q": "*"})).json()

    assert everything["total"] == 9
    assert star["total"] == 0
    assert set(fake_redis.data) == {"price_search_all", "price_search:*"}
    assert fake_redis.ttls["price_search_all"] == 900


@pytest.mark.asyncio
async def test_full_search_after_cached_star_query(client: AsyncClient, fake_redis: InMemoryRedis):
    star = (await client.get("/api/v1/price-discovery/search", params={"q": "*"})).json()
    everything = (await client.get("/api/v1/price-discovery/search")).json()

    assert star["total"] == 0
    assert everything["total"] == 9


@pytest.mark.asyncio
async def test_cached_search_is_served_from_redis(client: AsyncClient, fake_redis: InMemoryRedis):
    first = (await client.get("/api/v1/price-discovery/search", params={"q": "Rice"})).json()
    assert "price_search:rice" in fake_redis.data

    second = (await client.get("/api/v1/price-discovery/search", params={"q": "rice"})).json()
    assert second == first
    assert second["data"][0]["currentPrice"] == 2000


@pytest.mark.asyncio
async def test_get_session_requires_init_db(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(postgres_store, "_session_factory", None)
    with pytest.raises(RuntimeError, match="Database not initialized"):
        async with postgres_store.get_session():
            pass
