"""Pydantic schemas for API request/response validation."""

from app.schemas.auth import AuthData, AuthResponse, DemoUser, LoginRequest, RegisterRequest
from app.schemas.common import ErrorResponse, MessageResponse, NotFoundResponse
from app.schemas.price import CommodityPrice, PriceRange, PriceSearchResponse
from app.schemas.system import ConnectivityResponse, HealthResponse, ServerInfo
from app.schemas.translation import (
    Language,
    LanguagesResponse,
    TranslateRequest,
    TranslateResponse,
    Translation,
)
from app.schemas.vendor import VendorProfile, VendorProfileResponse

__all__ = [
    "AuthData",
    "AuthResponse",
    "DemoUser",
    "LoginRequest",
    "RegisterRequest",
    "ErrorResponse",
    "MessageResponse",
    "NotFoundResponse",
    "CommodityPrice",
    "PriceRange",
    "PriceSearchResponse",
    "ConnectivityResponse",
    "HealthResponse",
    "ServerInfo",
    "Language",
    "LanguagesResponse",
    "TranslateRequest",
    "TranslateResponse",
    "Translation",
    "VendorProfile",
    "VendorProfileResponse",
]
