"""Schemas for price discovery (/api/v1/price-discovery)."""

from datetime import datetime

from pydantic import BaseModel, Field


class PriceRange(BaseModel):
    """Observed price band for a commodity (INR per quintal).

    Whole-rupee prices stay integers on the wire (2000, not 2000.0).
    """

    min: int | float
    max: int | float
    modal: int | float


class CommodityPrice(BaseModel):
    """Current price record for one commodity."""

    id: str
    commodity: str
    current_price: int | float = Field(alias="currentPrice")
    price_range: PriceRange = Field(alias="priceRange")
    volatility: float
    last_updated: datetime = Field(alias="lastUpdated")
    sources: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class PriceSearchResponse(BaseModel):
    """Response payload for GET /api/v1/price-discovery/search."""

    success: bool = True
    data: list[CommodityPrice]
    total: int = Field(ge=0)
