"""Price discovery service.

Serves commodity prices for the demo from a fixed AGMARKNET-style snapshot.

Search semantics:
- Case-insensitive substring match on the commodity name
- Empty / absent query returns every record, in catalogue order

Responses are cached in Redis when it is available. Any cache problem
(not initialized, connection error, corrupt payload) is treated as a miss,
so the result is identical with or without Redis.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging

import redis.asyncio as redis
from pydantic import ValidationError

from app.schemas import CommodityPrice, PriceRange
from app.stores.redis import get_price_search_cache, set_price_search_cache

logger = logging.getLogger("uvicorn.error")

DEFAULT_SOURCE = "AGMARKNET"

# Snapshot time is fixed when the process starts.
_SNAPSHOT_AT = datetime.now(timezone.utc)

# (id, commodity, current/modal price, min, max, volatility %)
_MOCK_PRICES: list[tuple[str, str, int, int, int, float]] = [
    ("1", "Rice", 2000, 1800, 2200, 5.2),
    ("2", "Wheat", 2500, 2300, 2700, 3.8),
    ("3", "Cotton", 5500, 5200, 5800, 8.1),
    ("4", "Onion", 1200, 1000, 1400, 12.5),
    ("5", "Potato", 800, 700, 900, 6.3),
    ("6", "Tomato", 1500, 1200, 1800, 15.2),
    ("7", "Sugarcane", 350, 320, 380, 4.1),
    ("8", "Maize", 1800, 1650, 1950, 7.8),
    ("9", "Turmeric", 8500, 8000, 9000, 9.2),
]


def _build_catalogue() -> list[CommodityPrice]:
    return [
        CommodityPrice(
            id=record_id,
            commodity=commodity,
            current_price=price,
            price_range=PriceRange(min=low, max=high, modal=price),
            volatility=volatility,
            last_updated=_SNAPSHOT_AT,
            sources=[DEFAULT_SOURCE],
        )
        for record_id, commodity, price, low, high, volatility in _MOCK_PRICES
    ]


PRICE_CATALOGUE: list[CommodityPrice] = _build_catalogue()


def search_prices(query: str | None = None) -> list[CommodityPrice]:
    """Filter the price catalogue by commodity name.

    Args:
        query: Substring to look for (case-insensitive). Empty or None
            returns the full catalogue.

    Returns:
        Matching records in catalogue order.
    """
    if not query:
        return list(PRICE_CATALOGUE)

    needle = query.lower()
    return [item for item in PRICE_CATALOGUE if needle in item.commodity.lower()]


async def search_prices_cached(query: str | None = None) -> list[CommodityPrice]:
    """Search prices, reading through the Redis cache when it is connected."""
    query = query or ""

    cached = await _try_get_cached(query)
    if cached is not None:
        return cached

    results = search_prices(query)
    await _try_set_cached(query, results)
    return results


async def _try_get_cached(query: str) -> list[CommodityPrice] | None:
    try:
        payload = await get_price_search_cache(query)
    except RuntimeError:
        # Redis not initialized (tests / minimal local env).
        return None
    except (redis.RedisError, ValueError) as e:
        logger.warning(f"Price cache read failed for q={query!r}: {e}")
        return None
    if payload is None:
        return None

    try:
        return [CommodityPrice.model_validate(item) for item in payload]
    except ValidationError:
        logger.warning(f"Discarding malformed cached price payload for q={query!r}")
        return None


async def _try_set_cached(query: str, results: list[CommodityPrice]) -> None:
    records = [item.model_dump(mode="json", by_alias=True) for item in results]
    try:
        await set_price_search_cache(query, records)
    except RuntimeError:
        return
    except redis.RedisError as e:
        logger.warning(f"Price cache write failed for q={query!r}: {e}")
