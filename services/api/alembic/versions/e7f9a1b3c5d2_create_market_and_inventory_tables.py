"""create_market_and_inventory_tables

Revision ID: e7f9a1b3c5d2
Revises: c4d2b8e6f013
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "e7f9a1b3c5d2"
down_revision: Union[str, Sequence[str], None] = "c4d2b8e6f013"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

UPDATED_AT_TABLES = ("market_data", "price_alerts", "vendor_items")


def _now(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _vendor_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        ["vendor_id"],
        ["vendors.id"],
        name=f"fk_{table}_vendor_id_vendors",
        ondelete="CASCADE",
    )


def upgrade() -> None:
    op.create_table(
        "market_data",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("commodity", sa.String(length=100), nullable=False),
        sa.Column("market", sa.String(length=100), nullable=False),
        sa.Column("state", sa.String(length=50), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("min_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("modal_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("arrivals", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("sources", postgresql.JSONB(), nullable=True),
        sa.Column("volatility", sa.Numeric(5, 4), server_default=sa.text("0"), nullable=False),
        sa.Column("data_quality", sa.String(length=10), server_default="medium", nullable=False),
        _now("created_at"),
        _now("updated_at"),
        sa.CheckConstraint(
            "data_quality IN ('high', 'medium', 'low')",
            name="ck_market_data_data_quality",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_market_data"),
        sa.UniqueConstraint("commodity", "market", "date", name="uq_market_data_commodity_market_date"),
    )
    op.create_index("ix_market_data_commodity_date", "market_data", ["commodity", sa.text("date DESC")])
    op.create_index("ix_market_data_market_date", "market_data", ["market", sa.text("date DESC")])

    op.create_table(
        "price_alerts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("commodity", sa.String(length=100), nullable=False),
        sa.Column("alert_type", sa.String(length=20), nullable=False),
        sa.Column("threshold", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        _now("created_at"),
        _now("updated_at"),
        sa.CheckConstraint(
            "alert_type IN ('volatility', 'price_threshold', 'market_change')",
            name="ck_price_alerts_alert_type",
        ),
        _vendor_fk("price_alerts"),
        sa.PrimaryKeyConstraint("id", name="pk_price_alerts"),
    )
    op.create_index("ix_price_alerts_vendor_commodity", "price_alerts", ["vendor_id", "commodity"])

    op.create_table(
        "vendor_alerts",
        sa.Column("id", sa.String(length=100), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("commodity", sa.String(length=100), nullable=False),
        sa.Column("alert_type", sa.String(length=20), nullable=False),
        sa.Column("threshold_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("current_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _now("created_at"),
        _vendor_fk("vendor_alerts"),
        sa.PrimaryKeyConstraint("id", name="pk_vendor_alerts"),
    )
    op.create_index("ix_vendor_alerts_vendor_unread", "vendor_alerts", ["vendor_id", "is_read"])

    op.create_table(
        "vendor_items",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=False),
        sa.Column("quantity", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("quality", sa.String(length=20), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False),
        sa.Column("images", postgresql.JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="active", nullable=False),
        _now("created_at"),
        _now("updated_at"),
        sa.CheckConstraint("price > 0", name="ck_vendor_items_price_positive"),
        sa.CheckConstraint("quantity >= 0", name="ck_vendor_items_quantity_non_negative"),
        sa.CheckConstraint(
            "quality IN ('premium', 'standard', 'economy')",
            name="ck_vendor_items_quality",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'sold_out')",
            name="ck_vendor_items_status",
        ),
        _vendor_fk("vendor_items"),
        sa.PrimaryKeyConstraint("id", name="pk_vendor_items"),
    )
    op.create_index("ix_vendor_items_vendor_id", "vendor_items", ["vendor_id"])
    op.create_index("ix_vendor_items_category", "vendor_items", ["category"])
    op.create_index("ix_vendor_items_status", "vendor_items", ["status"])
    op.create_index("ix_vendor_items_price", "vendor_items", ["price"])
    op.create_index("ix_vendor_items_quality", "vendor_items", ["quality"])
    op.create_index("ix_vendor_items_vendor_status", "vendor_items", ["vendor_id", "status"])
    op.create_index("ix_vendor_items_category_status", "vendor_items", ["category", "status"])
    op.create_index("ix_vendor_items_status_price", "vendor_items", ["status", "price"])
    op.create_index("ix_vendor_items_created_at", "vendor_items", [sa.text("created_at DESC")])
    op.create_index(
        "ix_vendor_items_location_search",
        "vendor_items",
        [sa.text("to_tsvector('english', location)")],
        postgresql_using="gin",
    )
    op.create_index(
        "ix_vendor_items_name_search",
        "vendor_items",
        [sa.text("to_tsvector('english', name || ' ' || COALESCE(description, ''))")],
        postgresql_using="gin",
    )

    op.execute(
        """
        CREATE OR REPLACE VIEW active_vendor_items AS
        SELECT vi.*, v.name AS vendor_name, v.trust_score, v.verification_status,
               v.state, v.district, v.market
        FROM vendor_items vi
        JOIN vendors v ON vi.vendor_id = v.id
        WHERE vi.status = 'active' AND vi.quantity > 0
        """
    )

    # update_updated_at_column() is created by the core tables revision.
    for table in UPDATED_AT_TABLES:
        op.execute(
            f"CREATE TRIGGER update_{table}_updated_at BEFORE UPDATE ON {table} "
            "FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()"
        )


def downgrade() -> None:
    for table in UPDATED_AT_TABLES:
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.execute("DROP VIEW IF EXISTS active_vendor_items")
    op.drop_table("vendor_items")
    op.drop_table("vendor_alerts")
    op.drop_table("price_alerts")
    op.drop_table("market_data")
