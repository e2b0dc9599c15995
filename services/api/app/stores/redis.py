"""Redis store for response caching.

Handles:
- Caching with TTL policies
- JSON (de)serialization of cached payloads

TTL policies:
- Price search responses: ~15 minutes (PRICE_CACHE_TTL)

Redis is optional for the demo. Callers treat RuntimeError (not initialized)
and redis.RedisError (connection trouble) as a cache miss.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from app.settings import get_settings

# Key prefixes
PREFIX_PRICE_SEARCH = "price_search:"
# Full catalogue (empty query); outside PREFIX_PRICE_SEARCH so no query maps to it
KEY_PRICE_SEARCH_ALL = "price_search_all"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection.

    The client is only published after a successful PING, so a dead Redis
    leaves the store uninitialized instead of half-connected.
    """
    global _redis
    settings = get_settings()
    client = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    try:
        await client.ping()
    except redis.RedisError:
        await client.aclose()
        raise
    _redis = client
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_get(key: str) -> str | None:
    """Get value from cache.

    Args:
        key: Cache key.

    Returns:
        Cached value or None if not found.
    """
    return await _get_redis().get(key)


async def cache_set(key: str, value: str, ttl: int) -> None:
    """Set value in cache with TTL.

    Args:
        key: Cache key.
        value: Value to cache.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(key, ttl, value)


async def cache_get_json(key: str) -> Any | None:
    """Get JSON value from cache.

    Returns:
        Parsed JSON value or None if not found.
    """
    value = await cache_get(key)
    if value:
        return json.loads(value)
    return None


async def cache_set_json(key: str, value: Any, ttl: int) -> None:
    await cache_set(key, json.dumps(value), ttl)


# ============================================================
# Price discovery cache
# ============================================================


def price_search_key(query: str) -> str:
    """Cache key for a price search; queries differing only in case share it."""
    if not query:
        return KEY_PRICE_SEARCH_ALL
    return f"{PREFIX_PRICE_SEARCH}{query.lower()}"


async def get_price_search_cache(query: str) -> list[dict[str, Any]] | None:
    """Get cached price records for a search query."""
    payload = await cache_get_json(price_search_key(query))
    if isinstance(payload, list):
        return payload
    return None


async def set_price_search_cache(query: str, records: list[dict[str, Any]]) -> None:
    """Cache price records for a search query (TTL from settings)."""
    ttl = get_settings().price_cache_ttl
    if ttl <= 0:
        return
    await cache_set_json(price_search_key(query), records, ttl)

