"""SQLAlchemy ORM models.

Models represent database tables:
- vendors (+ verification_documents, refresh_tokens, vendor_flags)
- language_preferences: per-vendor translation settings
- trade_sessions, session_participants, negotiations, trust_ratings
- market_integrations: external price feed configuration
- market_data, price_alerts, vendor_alerts: mandi prices and alerts
- vendor_items: vendor inventory listings
- analytics: weekly summaries, exports/deletions, insight delivery,
  performance snapshots, market trends, analytics preferences

The demo API does not query these tables; they back migrations and seeding.
"""

from app.models.analytics import (
    DataDeletionRequest,
    DataExportRequest,
    InsightDeliveryLog,
    MarketTrendAnalysis,
    TradingPerformanceSnapshot,
    VendorAnalyticsPreferences,
    WeeklyTradingSummary,
)
from app.models.language_preference import LanguagePreference
from app.models.market import MarketData, PriceAlert, VendorAlert
from app.models.market_integration import MarketIntegration
from app.models.trade import Negotiation, SessionParticipant, TradeSession, TrustRating
from app.models.vendor import RefreshToken, Vendor, VendorFlag, VerificationDocument
from app.models.vendor_item import VendorItem

__all__ = [
    "Vendor",
    "VerificationDocument",
    "RefreshToken",
    "VendorFlag",
    "LanguagePreference",
    "TradeSession",
    "SessionParticipant",
    "Negotiation",
    "TrustRating",
    "MarketIntegration",
    "MarketData",
    "PriceAlert",
    "VendorAlert",
    "VendorItem",
    "WeeklyTradingSummary",
    "DataExportRequest",
    "DataDeletionRequest",
    "InsightDeliveryLog",
    "TradingPerformanceSnapshot",
    "MarketTrendAnalysis",
    "VendorAnalyticsPreferences",
]
