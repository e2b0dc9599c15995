"""create_analytics_tables

Revision ID: c4d2b8e6f013
Revises: a1c3e5f7b901
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "c4d2b8e6f013"
down_revision: Union[str, Sequence[str], None] = "a1c3e5f7b901"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

REQUEST_STATUSES = "'pending', 'processing', 'completed', 'failed'"
DELIVERY_METHODS = "'email', 'sms', 'push', 'in_app'"
PERIOD_TYPES = "'daily', 'weekly', 'monthly'"
FILE_FORMATS = "'csv', 'json'"
LEVELS = "'high', 'medium', 'low'"


def _vendor_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        ["vendor_id"],
        ["vendors.id"],
        name=f"fk_{table}_vendor_id_vendors",
        ondelete="CASCADE",
    )


def _now(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _zero(name: str, type_: sa.types.TypeEngine) -> sa.Column:
    return sa.Column(name, type_, server_default=sa.text("0"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "weekly_trading_summaries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("week_start_date", sa.Date(), nullable=False),
        sa.Column("week_end_date", sa.Date(), nullable=False),
        _zero("total_trades", sa.Integer()),
        _zero("successful_trades", sa.Integer()),
        _zero("total_volume", sa.Numeric(15, 3)),
        _zero("average_price", sa.Numeric(10, 2)),
        _zero("profit_margin", sa.Numeric(5, 4)),
        sa.Column("top_commodities", postgresql.JSONB(), nullable=True),
        sa.Column("market_performance", postgresql.JSONB(), nullable=True),
        sa.Column("recommendations", postgresql.ARRAY(sa.Text()), nullable=True),
        _now("generated_at"),
        _now("created_at"),
        _vendor_fk("weekly_trading_summaries"),
        sa.PrimaryKeyConstraint("id", name="pk_weekly_trading_summaries"),
        sa.UniqueConstraint("vendor_id", "week_start_date", name="uq_weekly_trading_summaries_vendor_week"),
    )
    op.create_index(
        "ix_weekly_summaries_vendor_date",
        "weekly_trading_summaries",
        ["vendor_id", sa.text("week_start_date DESC")],
    )
    op.create_index(
        "ix_weekly_summaries_generated_at",
        "weekly_trading_summaries",
        [sa.text("generated_at DESC")],
    )

    op.create_table(
        "data_export_requests",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("export_type", sa.String(length=50), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("file_format", sa.String(length=10), server_default="csv", nullable=False),
        sa.Column("file_path", sa.String(length=500), nullable=True),
        sa.Column("file_size_bytes", sa.BigInteger(), nullable=True),
        sa.Column("download_url", sa.String(length=500), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        _now("requested_at"),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "export_type IN ('trading_history', 'performance_metrics', 'market_insights', 'complete_profile')",
            name="ck_data_export_requests_export_type",
        ),
        sa.CheckConstraint(f"status IN ({REQUEST_STATUSES})", name="ck_data_export_requests_status"),
        sa.CheckConstraint(f"file_format IN ({FILE_FORMATS})", name="ck_data_export_requests_file_format"),
        _vendor_fk("data_export_requests"),
        sa.PrimaryKeyConstraint("id", name="pk_data_export_requests"),
    )
    op.create_index("ix_export_requests_vendor_status", "data_export_requests", ["vendor_id", "status"])
    op.create_index("ix_export_requests_requested_at", "data_export_requests", [sa.text("requested_at DESC")])
    op.create_index("ix_data_export_requests_expires_at", "data_export_requests", ["expires_at"])

    op.create_table(
        "data_deletion_requests",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("request_type", sa.String(length=50), nullable=False),
        sa.Column("data_categories", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        _now("requested_at"),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verification_token", sa.String(length=255), nullable=True),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("processing_notes", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "request_type IN ('partial', 'complete')",
            name="ck_data_deletion_requests_request_type",
        ),
        sa.CheckConstraint(f"status IN ({REQUEST_STATUSES})", name="ck_data_deletion_requests_status"),
        _vendor_fk("data_deletion_requests"),
        sa.PrimaryKeyConstraint("id", name="pk_data_deletion_requests"),
    )
    op.create_index("ix_deletion_requests_vendor_status", "data_deletion_requests", ["vendor_id", "status"])
    op.create_index(
        "ix_deletion_requests_requested_at",
        "data_deletion_requests",
        [sa.text("requested_at DESC")],
    )

    op.create_table(
        "insight_delivery_log",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("insight_id", sa.String(length=255), nullable=False),
        sa.Column("delivery_method", sa.String(length=20), nullable=False),
        sa.Column("delivery_status", sa.String(length=20), nullable=False),
        _now("attempted_at"),
        sa.Column("delivered_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.CheckConstraint(
            f"delivery_method IN ({DELIVERY_METHODS})",
            name="ck_insight_delivery_log_delivery_method",
        ),
        sa.CheckConstraint(
            "delivery_status IN ('pending', 'sent', 'delivered', 'failed', 'bounced')",
            name="ck_insight_delivery_log_delivery_status",
        ),
        _vendor_fk("insight_delivery_log"),
        sa.PrimaryKeyConstraint("id", name="pk_insight_delivery_log"),
    )
    op.create_index(
        "ix_insight_delivery_vendor_status",
        "insight_delivery_log",
        ["vendor_id", "delivery_status"],
    )
    op.create_index(
        "ix_insight_delivery_attempted_at",
        "insight_delivery_log",
        [sa.text("attempted_at DESC")],
    )

    op.create_table(
        "trading_performance_snapshots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("snapshot_date", sa.Date(), nullable=False),
        sa.Column("period_type", sa.String(length=20), nullable=False),
        _zero("total_trades", sa.Integer()),
        _zero("successful_trades", sa.Integer()),
        _zero("total_volume", sa.Numeric(15, 3)),
        _zero("average_price", sa.Numeric(10, 2)),
        _zero("profit_margin", sa.Numeric(5, 4)),
        _zero("success_rate", sa.Numeric(5, 2)),
        _zero("average_negotiation_time", sa.Numeric(8, 2)),
        sa.Column("commodities_traded", postgresql.ARRAY(sa.Text()), nullable=True),
        _zero("performance_score", sa.Numeric(5, 2)),
        _now("created_at"),
        sa.CheckConstraint(
            f"period_type IN ({PERIOD_TYPES})",
            name="ck_trading_performance_snapshots_period_type",
        ),
        _vendor_fk("trading_performance_snapshots"),
        sa.PrimaryKeyConstraint("id", name="pk_trading_performance_snapshots"),
        sa.UniqueConstraint(
            "vendor_id",
            "snapshot_date",
            "period_type",
            name="uq_trading_performance_snapshots_vendor_date_period",
        ),
    )
    op.create_index(
        "ix_performance_snapshots_vendor_date",
        "trading_performance_snapshots",
        ["vendor_id", sa.text("snapshot_date DESC")],
    )
    op.create_index(
        "ix_trading_performance_snapshots_period_type",
        "trading_performance_snapshots",
        ["period_type"],
    )

    op.create_table(
        "market_trend_analysis",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("commodity", sa.String(length=100), nullable=False),
        sa.Column("region", sa.String(length=100), nullable=False),
        sa.Column("analysis_date", sa.Date(), nullable=False),
        sa.Column("trend_direction", sa.String(length=20), nullable=False),
        sa.Column("change_percent", sa.Numeric(8, 4), nullable=False),
        sa.Column("volatility", sa.Numeric(8, 6), nullable=False),
        sa.Column("demand_level", sa.String(length=10), nullable=False),
        sa.Column("supply_level", sa.String(length=10), nullable=False),
        sa.Column("seasonal_factor", sa.Numeric(6, 4), server_default=sa.text("1.0"), nullable=False),
        sa.Column("predicted_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("confidence", sa.Numeric(4, 3), nullable=False),
        sa.Column("analysis_metadata", postgresql.JSONB(), nullable=True),
        _now("created_at"),
        sa.CheckConstraint(
            "trend_direction IN ('rising', 'falling', 'stable')",
            name="ck_market_trend_analysis_trend_direction",
        ),
        sa.CheckConstraint(f"demand_level IN ({LEVELS})", name="ck_market_trend_analysis_demand_level"),
        sa.CheckConstraint(f"supply_level IN ({LEVELS})", name="ck_market_trend_analysis_supply_level"),
        sa.PrimaryKeyConstraint("id", name="pk_market_trend_analysis"),
        sa.UniqueConstraint(
            "commodity",
            "region",
            "analysis_date",
            name="uq_market_trend_analysis_commodity_region_date",
        ),
    )
    op.create_index(
        "ix_trend_analysis_commodity_date",
        "market_trend_analysis",
        ["commodity", sa.text("analysis_date DESC")],
    )
    op.create_index(
        "ix_trend_analysis_region_date",
        "market_trend_analysis",
        ["region", sa.text("analysis_date DESC")],
    )

    op.create_table(
        "vendor_analytics_preferences",
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("weekly_summary_enabled", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "insight_notifications_enabled",
            sa.Boolean(),
            server_default=sa.text("true"),
            nullable=False,
        ),
        sa.Column("preferred_delivery_method", sa.String(length=20), server_default="email", nullable=False),
        sa.Column("insight_frequency", sa.String(length=20), server_default="weekly", nullable=False),
        sa.Column("data_retention_days", sa.Integer(), server_default=sa.text("365"), nullable=False),
        sa.Column("export_format_preference", sa.String(length=10), server_default="csv", nullable=False),
        _now("updated_at"),
        sa.CheckConstraint(
            f"preferred_delivery_method IN ({DELIVERY_METHODS})",
            name="ck_vendor_analytics_preferences_preferred_delivery_method",
        ),
        sa.CheckConstraint(
            f"insight_frequency IN ({PERIOD_TYPES})",
            name="ck_vendor_analytics_preferences_insight_frequency",
        ),
        sa.CheckConstraint(
            f"export_format_preference IN ({FILE_FORMATS})",
            name="ck_vendor_analytics_preferences_export_format_preference",
        ),
        _vendor_fk("vendor_analytics_preferences"),
        sa.PrimaryKeyConstraint("vendor_id", name="pk_vendor_analytics_preferences"),
    )

    # update_updated_at_column() is created by the core tables revision.
    op.execute(
        "CREATE TRIGGER update_vendor_analytics_preferences_updated_at "
        "BEFORE UPDATE ON vendor_analytics_preferences "
        "FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()"
    )


def downgrade() -> None:
    op.execute(
        "DROP TRIGGER IF EXISTS update_vendor_analytics_preferences_updated_at "
        "ON vendor_analytics_preferences"
    )
    op.drop_table("vendor_analytics_preferences")
    op.drop_table("market_trend_analysis")
    op.drop_table("trading_performance_snapshots")
    op.drop_table("insight_delivery_log")
    op.drop_table("data_deletion_requests")
    op.drop_table("data_export_requests")
    op.drop_table("weekly_trading_summaries")
