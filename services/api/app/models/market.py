"""Price discovery models.

Daily mandi price observations plus the alert subscriptions vendors hold on
them and the alerts raised when a subscription fires.
"""

from datetime import date, datetime
from decimal import Decimal
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.analytics import generate_request_id
from app.services.domain import AlertType, Level, sql_in
from app.stores.postgres import Base


class MarketData(Base):
    """Price band observed for a commodity at one market on one day."""

    __tablename__ = "market_data"
    __table_args__ = (
        UniqueConstraint("commodity", "market", "date", name="uq_market_data_commodity_market_date"),
        CheckConstraint(sql_in("data_quality", Level), name="data_quality"),
        Index("ix_market_data_commodity_date", "commodity", text("date DESC")),
        Index("ix_market_data_market_date", "market", text("date DESC")),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    commodity: Mapped[str] = mapped_column(String(100))
    market: Mapped[str] = mapped_column(String(100))
    state: Mapped[str] = mapped_column(String(50))
    # Column "date"
    observed_on: Mapped[date] = mapped_column("date", Date)

    # INR per quintal
    min_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    max_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    modal_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    arrivals: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))

    # ["AGMARKNET", "data.gov.in"]
    sources: Mapped[list[str] | None] = mapped_column(JSONB)
    # Fraction, e.g. 0.052 for 5.2%
    volatility: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=0, server_default=text("0"))
    data_quality: Mapped[str] = mapped_column(
        String(10),
        default=Level.MEDIUM.value,
        server_default=Level.MEDIUM.value,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<MarketData {self.commodity}@{self.market} {self.observed_on}>"


class PriceAlert(Base):
    """Vendor subscription to price movements of a commodity."""

    __tablename__ = "price_alerts"
    __table_args__ = (
        CheckConstraint(sql_in("alert_type", AlertType), name="alert_type"),
        Index("ix_price_alerts_vendor_commodity", "vendor_id", "commodity"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
    )
    commodity: Mapped[str] = mapped_column(String(100))
    alert_type: Mapped[str] = mapped_column(String(20))
    threshold: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


class VendorAlert(Base):
    """Alert raised for a vendor when a price alert fires."""

    __tablename__ = "vendor_alerts"
    __table_args__ = (
        Index("ix_vendor_alerts_vendor_unread", "vendor_id", "is_read"),
    )

    id: Mapped[str] = mapped_column(String(100), primary_key=True, default=generate_request_id)
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
    )
    commodity: Mapped[str] = mapped_column(String(100))
    alert_type: Mapped[str] = mapped_column(String(20))
    threshold_value: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    current_value: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    message: Mapped[str] = mapped_column(Text)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
