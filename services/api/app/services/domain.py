"""Domain vocabulary for the mandi marketplace.

Enumerations here are the single source of allowed values for:
- CHECK constraints on the ORM models / migrations
- Pydantic schema fields that describe the same concepts
"""

from enum import Enum


class BusinessType(str, Enum):
    """Kind of marketplace participant."""

    FARMER = "farmer"
    TRADER = "trader"
    WHOLESALER = "wholesaler"
    RETAILER = "retailer"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class TradeSessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NegotiationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COUNTERED = "countered"


class LanguageCode(str, Enum):
    """Languages a vendor may store as a preference.

    Odia and Assamese are accepted as preferences even though the
    translation catalogue does not list them yet.
    """

    HINDI = "hi"
    ENGLISH = "en"
    TAMIL = "ta"
    TELUGU = "te"
    BENGALI = "bn"
    MARATHI = "mr"
    GUJARATI = "gu"
    KANNADA = "kn"
    MALAYALAM = "ml"
    PUNJABI = "pa"
    ODIA = "or"
    ASSAMESE = "as"


# Price discovery / inventory


class AlertType(str, Enum):
    """What a price alert subscription watches."""

    VOLATILITY = "volatility"
    PRICE_THRESHOLD = "price_threshold"
    MARKET_CHANGE = "market_change"


class ItemQuality(str, Enum):
    PREMIUM = "premium"
    STANDARD = "standard"
    ECONOMY = "economy"


class ItemStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SOLD_OUT = "sold_out"


# Analytics / reporting


class ExportType(str, Enum):
    TRADING_HISTORY = "trading_history"
    PERFORMANCE_METRICS = "performance_metrics"
    MARKET_INSIGHTS = "market_insights"
    COMPLETE_PROFILE = "complete_profile"


class RequestStatus(str, Enum):
    """Lifecycle of export / deletion requests."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class FileFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


class DeletionRequestType(str, Enum):
    PARTIAL = "partial"
    COMPLETE = "complete"


class DeliveryMethod(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    IN_APP = "in_app"


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    BOUNCED = "bounced"


class PeriodType(str, Enum):
    """Snapshot granularity; also used for insight frequency."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TrendDirection(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class Level(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def sql_in(column: str, enum_cls: type[Enum]) -> str:
    """Render a CHECK expression restricting `column` to the enum's values.

    Example: sql_in("status", TradeSessionStatus)
    -> "status IN ('active', 'completed', 'cancelled')"
    """
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"
