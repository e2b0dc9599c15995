"""Price discovery endpoints.

GET /api/v1/price-discovery/search?q= - commodity prices by name.

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Query

from app.schemas import PriceSearchResponse
from app.services.price_discovery import search_prices_cached

router = APIRouter()


@router.get("/search", response_model=PriceSearchResponse)
async def search(
    q: str | None = Query(
        default=None,
        description="Commodity name or fragment (case-insensitive)",
        examples=["rice", "to"],
    ),
) -> PriceSearchResponse:
    """Search current commodity prices.

    Returns:
        PriceSearchResponse with matching records and their count.
    """
    results = await search_prices_cached(q)
    return PriceSearchResponse(data=results, total=len(results))
