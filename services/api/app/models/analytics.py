"""Analytics and reporting models.

Tables written by offline analytics jobs (weekly summaries, performance
snapshots, market trend analysis) plus the bookkeeping for vendor data
export / deletion requests and insight delivery.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any
import uuid

from sqlalchemy import (
    BigInteger,
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
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.services.domain import (
    DeletionRequestType,
    DeliveryMethod,
    DeliveryStatus,
    ExportType,
    FileFormat,
    Level,
    PeriodType,
    RequestStatus,
    TrendDirection,
    sql_in,
)
from app.stores.postgres import Base


def generate_request_id() -> str:
    """Generate public ID for export/deletion/delivery rows."""
    return str(uuid.uuid4())


def _vendor_fk(**kwargs: Any) -> Mapped[uuid.UUID]:
    return mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        **kwargs,
    )


class WeeklyTradingSummary(Base):
    """Per-vendor weekly rollup of trading activity."""

    __tablename__ = "weekly_trading_summaries"
    __table_args__ = (
        UniqueConstraint("vendor_id", "week_start_date", name="uq_weekly_trading_summaries_vendor_week"),
        Index("ix_weekly_summaries_vendor_date", "vendor_id", text("week_start_date DESC")),
        Index("ix_weekly_summaries_generated_at", text("generated_at DESC")),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    vendor_id: Mapped[uuid.UUID] = _vendor_fk()
    week_start_date: Mapped[date] = mapped_column(Date)
    week_end_date: Mapped[date] = mapped_column(Date)

    total_trades: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    successful_trades: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    total_volume: Mapped[Decimal] = mapped_column(Numeric(15, 3), default=0, server_default=text("0"))
    average_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, server_default=text("0"))
    profit_margin: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=0, server_default=text("0"))

    # [{"commodity": "Rice", "volume": 500, "profit": 1875}, ...]
    top_commodities: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONB)
    market_performance: Mapped[dict[str, Any] | None] = mapped_column(JSONB)
    recommendations: Mapped[list[str] | None] = mapped_column(ARRAY(Text))

    generated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class DataExportRequest(Base):
    """Vendor request to export their data as a downloadable file."""

    __tablename__ = "data_export_requests"
    __table_args__ = (
        CheckConstraint(sql_in("export_type", ExportType), name="export_type"),
        CheckConstraint(sql_in("status", RequestStatus), name="status"),
        CheckConstraint(sql_in("file_format", FileFormat), name="file_format"),
        Index("ix_export_requests_vendor_status", "vendor_id", "status"),
        Index("ix_export_requests_requested_at", text("requested_at DESC")),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=generate_request_id)
    vendor_id: Mapped[uuid.UUID] = _vendor_fk()
    export_type: Mapped[str] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(
        String(20),
        default=RequestStatus.PENDING.value,
        server_default=RequestStatus.PENDING.value,
    )
    file_format: Mapped[str] = mapped_column(
        String(10),
        default=FileFormat.CSV.value,
        server_default=FileFormat.CSV.value,
    )

    file_path: Mapped[str | None] = mapped_column(String(500))
    file_size_bytes: Mapped[int | None] = mapped_column(BigInteger)
    download_url: Mapped[str | None] = mapped_column(String(500))
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)

    requested_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    error_message: Mapped[str | None] = mapped_column(Text)


class DataDeletionRequest(Base):
    """Vendor request to erase part or all of their data."""

    __tablename__ = "data_deletion_requests"
    __table_args__ = (
        CheckConstraint(sql_in("request_type", DeletionRequestType), name="request_type"),
        CheckConstraint(sql_in("status", RequestStatus), name="status"),
        Index("ix_deletion_requests_vendor_status", "vendor_id", "status"),
        Index("ix_deletion_requests_requested_at", text("requested_at DESC")),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=generate_request_id)
    vendor_id: Mapped[uuid.UUID] = _vendor_fk()
    request_type: Mapped[str] = mapped_column(String(50))
    data_categories: Mapped[list[str] | None] = mapped_column(ARRAY(Text))
    status: Mapped[str] = mapped_column(
        String(20),
        default=RequestStatus.PENDING.value,
        server_default=RequestStatus.PENDING.value,
    )

    requested_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    processed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    verification_token: Mapped[str | None] = mapped_column(String(255))
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    processing_notes: Mapped[str | None] = mapped_column(Text)


class InsightDeliveryLog(Base):
    """One delivery attempt of a market insight to a vendor."""

    __tablename__ = "insight_delivery_log"
    __table_args__ = (
        CheckConstraint(sql_in("delivery_method", DeliveryMethod), name="delivery_method"),
        CheckConstraint(sql_in("delivery_status", DeliveryStatus), name="delivery_status"),
        Index("ix_insight_delivery_vendor_status", "vendor_id", "delivery_status"),
        Index("ix_insight_delivery_attempted_at", text("attempted_at DESC")),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=generate_request_id)
    vendor_id: Mapped[uuid.UUID] = _vendor_fk()
    insight_id: Mapped[str] = mapped_column(String(255))
    delivery_method: Mapped[str] = mapped_column(String(20))
    delivery_status: Mapped[str] = mapped_column(String(20))

    attempted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    delivered_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    error_message: Mapped[str | None] = mapped_column(Text)


class TradingPerformanceSnapshot(Base):
    """Daily/weekly/monthly performance metrics for a vendor."""

    __tablename__ = "trading_performance_snapshots"
    __table_args__ = (
        UniqueConstraint(
            "vendor_id",
            "snapshot_date",
            "period_type",
            name="uq_trading_performance_snapshots_vendor_date_period",
        ),
        CheckConstraint(sql_in("period_type", PeriodType), name="period_type"),
        Index("ix_performance_snapshots_vendor_date", "vendor_id", text("snapshot_date DESC")),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    vendor_id: Mapped[uuid.UUID] = _vendor_fk()
    snapshot_date: Mapped[date] = mapped_column(Date)
    period_type: Mapped[str] = mapped_column(String(20), index=True)

    total_trades: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    successful_trades: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    total_volume: Mapped[Decimal] = mapped_column(Numeric(15, 3), default=0, server_default=text("0"))
    average_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, server_default=text("0"))
    profit_margin: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=0, server_default=text("0"))
    success_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=0, server_default=text("0"))
    # Minutes
    average_negotiation_time: Mapped[Decimal] = mapped_column(
        Numeric(8, 2),
        default=0,
        server_default=text("0"),
    )
    commodities_traded: Mapped[list[str] | None] = mapped_column(ARRAY(Text))
    performance_score: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=0, server_default=text("0"))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class MarketTrendAnalysis(Base):
    """Computed trend for a commodity in a region on a given day."""

    __tablename__ = "market_trend_analysis"
    __table_args__ = (
        UniqueConstraint(
            "commodity",
            "region",
            "analysis_date",
            name="uq_market_trend_analysis_commodity_region_date",
        ),
        CheckConstraint(sql_in("trend_direction", TrendDirection), name="trend_direction"),
        CheckConstraint(sql_in("demand_level", Level), name="demand_level"),
        CheckConstraint(sql_in("supply_level", Level), name="supply_level"),
        Index("ix_trend_analysis_commodity_date", "commodity", text("analysis_date DESC")),
        Index("ix_trend_analysis_region_date", "region", text("analysis_date DESC")),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    commodity: Mapped[str] = mapped_column(String(100))
    region: Mapped[str] = mapped_column(String(100))
    analysis_date: Mapped[date] = mapped_column(Date)

    trend_direction: Mapped[str] = mapped_column(String(20))
    change_percent: Mapped[Decimal] = mapped_column(Numeric(8, 4))
    volatility: Mapped[Decimal] = mapped_column(Numeric(8, 6))
    demand_level: Mapped[str] = mapped_column(String(10))
    supply_level: Mapped[str] = mapped_column(String(10))
    seasonal_factor: Mapped[Decimal] = mapped_column(
        Numeric(6, 4),
        default=Decimal("1.0"),
        server_default=text("1.0"),
    )
    predicted_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    confidence: Mapped[Decimal] = mapped_column(Numeric(4, 3))
    analysis_metadata: Mapped[dict[str, Any] | None] = mapped_column(JSONB)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class VendorAnalyticsPreferences(Base):
    """Opt-ins and delivery settings for analytics features (one row per vendor)."""

    __tablename__ = "vendor_analytics_preferences"
    __table_args__ = (
        CheckConstraint(
            sql_in("preferred_delivery_method", DeliveryMethod),
            name="preferred_delivery_method",
        ),
        CheckConstraint(sql_in("insight_frequency", PeriodType), name="insight_frequency"),
        CheckConstraint(sql_in("export_format_preference", FileFormat), name="export_format_preference"),
    )

    vendor_id: Mapped[uuid.UUID] = _vendor_fk(primary_key=True)
    weekly_summary_enabled: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"))
    insight_notifications_enabled: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        server_default=text("true"),
    )
    preferred_delivery_method: Mapped[str] = mapped_column(
        String(20),
        default=DeliveryMethod.EMAIL.value,
        server_default=DeliveryMethod.EMAIL.value,
    )
    insight_frequency: Mapped[str] = mapped_column(
        String(20),
        default=PeriodType.WEEKLY.value,
        server_default=PeriodType.WEEKLY.value,
    )
    data_retention_days: Mapped[int] = mapped_column(Integer, default=365, server_default=text("365"))
    export_format_preference: Mapped[str] = mapped_column(
        String(10),
        default=FileFormat.CSV.value,
        server_default=FileFormat.CSV.value,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
