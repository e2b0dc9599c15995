"""Schemas for vendor profiles (/api/v1/vendors)."""

from pydantic import BaseModel, Field

from app.services.domain import BusinessType, LanguageCode, VerificationStatus


class Location(BaseModel):
    state: str
    district: str
    market: str


class TradingHistory(BaseModel):
    total_trades: int = Field(alias="totalTrades", ge=0)
    successful_trades: int = Field(alias="successfulTrades", ge=0)
    average_rating: float = Field(alias="averageRating", ge=0, le=5)

    model_config = {"populate_by_name": True}


class VendorProfile(BaseModel):
    """Public vendor profile."""

    id: str
    name: str
    email: str
    phone: str
    business_type: BusinessType = Field(alias="businessType")
    location: Location
    preferred_language: LanguageCode = Field(alias="preferredLanguage")
    secondary_languages: list[LanguageCode] = Field(alias="secondaryLanguages", default_factory=list)
    trust_score: float = Field(alias="trustScore", ge=0, le=5)
    verification_status: VerificationStatus = Field(alias="verificationStatus")
    trading_history: TradingHistory = Field(alias="tradingHistory")

    model_config = {"populate_by_name": True}


class VendorProfileData(BaseModel):
    profile: VendorProfile


class VendorProfileResponse(BaseModel):
    success: bool = True
    data: VendorProfileData
