"""Schema tests for the ORM models (no database required).

DDL is compiled against the PostgreSQL dialect and inspected as text.
"""

import pytest
from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable

from app.models import MarketData, Vendor, VendorFlag, VendorItem
from app.services.domain import BusinessType, TradeSessionStatus, sql_in
from app.stores.postgres import Base

EXPECTED_TABLES = {
    "vendors",
    "trade_sessions",
    "session_participants",
    "negotiations",
    "trust_ratings",
    "market_integrations",
    "verification_documents",
    "refresh_tokens",
    "vendor_flags",
    "language_preferences",
    "weekly_trading_summaries",
    "data_export_requests",
    "data_deletion_requests",
    "insight_delivery_log",
    "trading_performance_snapshots",
    "market_trend_analysis",
    "vendor_analytics_preferences",
    "market_data",
    "price_alerts",
    "vendor_alerts",
    "vendor_items",
}


def _ddl(table_name: str) -> str:
    table = Base.metadata.tables[table_name]
    return str(CreateTable(table).compile(dialect=postgresql.dialect()))


def _check_names(table_name: str) -> set[str]:
    table = Base.metadata.tables[table_name]
    return {c.name for c in table.constraints if isinstance(c, CheckConstraint)}


def test_all_tables_registered():
    assert set(Base.metadata.tables) == EXPECTED_TABLES


@pytest.mark.parametrize("table_name", sorted(EXPECTED_TABLES))
def test_tables_compile_for_postgres(table_name: str):
    assert f"CREATE TABLE {table_name}" in _ddl(table_name)


def test_sql_in_renders_enum_values():
    assert sql_in("status", TradeSessionStatus) == "status IN ('active', 'completed', 'cancelled')"


def test_vendor_constraints():
    ddl = _ddl("vendors")
    assert sql_in("business_type", BusinessType) in ddl
    assert "trust_score >= 0 AND trust_score <= 5" in ddl
    assert "UNIQUE (email)" in ddl
    assert "UNIQUE (phone)" in ddl
    assert _check_names("vendors") == {
        "ck_vendors_business_type",
        "ck_vendors_verification_status",
        "ck_vendors_trust_score_range",
    }


def test_session_participants_composite_primary_key():
    table = Base.metadata.tables["session_participants"]
    assert [c.name for c in table.primary_key.columns] == ["session_id", "vendor_id"]
    for fk in table.foreign_keys:
        assert fk.ondelete == "CASCADE"


def test_trust_rating_unique_per_session_pair():
    table = Base.metadata.tables["trust_ratings"]
    uniques = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
    assert [[col.name for col in u.columns] for u in uniques] == [
        ["rater_id", "rated_vendor_id", "session_id"]
    ]
    assert "rating >= 1 AND rating <= 5" in _ddl("trust_ratings")


def test_vendor_flag_partial_unique_index():
    index = next(i for i in VendorFlag.__table__.indexes if i.name == "uq_vendor_flags_active_vendor_type")
    assert index.unique
    ddl = str(CreateIndex(index).compile(dialect=postgresql.dialect()))
    assert "CREATE UNIQUE INDEX uq_vendor_flags_active_vendor_type" in ddl
    assert "WHERE is_resolved = false" in ddl


def test_language_preference_accepts_twelve_languages():
    ddl = _ddl("language_preferences")
    for code in ("hi", "en", "ta", "te", "bn", "mr", "gu", "kn", "ml", "pa", "or", "as"):
        assert f"'{code}'" in ddl


def test_analytics_tables_cascade_with_vendor():
    for name in (
        "weekly_trading_summaries",
        "data_export_requests",
        "data_deletion_requests",
        "insight_delivery_log",
        "trading_performance_snapshots",
        "vendor_analytics_preferences",
    ):
        fks = list(Base.metadata.tables[name].foreign_keys)
        assert len(fks) == 1
        assert fks[0].column.table.name == "vendors"
        assert fks[0].ondelete == "CASCADE"


def test_vendor_defaults():
    columns = Vendor.__table__.c
    assert columns.preferred_language.server_default.arg == "hi"
    assert columns.verification_status.server_default.arg == "pending"
    assert columns.id.server_default.arg.text == "gen_random_uuid()"


def test_market_data_unique_per_commodity_market_day():
    ddl = _ddl("market_data")
    assert "CONSTRAINT uq_market_data_commodity_market_date UNIQUE (commodity, market, date)" in ddl
    assert "data_quality IN ('high', 'medium', 'low')" in ddl
    assert MarketData.__table__.c.date.key == "date"
    assert MarketData.observed_on.property.columns[0].name == "date"


def test_alert_tables_cascade_with_vendor():
    for name in ("price_alerts", "vendor_alerts"):
        (fk,) = Base.metadata.tables[name].foreign_keys
        assert fk.column.table.name == "vendors"
        assert fk.ondelete == "CASCADE"
    assert "alert_type IN ('volatility', 'price_threshold', 'market_change')" in _ddl("price_alerts")


def test_vendor_item_constraints_and_search_indexes():
    ddl = _ddl("vendor_items")
    assert "price > 0" in ddl
    assert "quantity >= 0" in ddl
    assert "quality IN ('premium', 'standard', 'economy')" in ddl
    assert "status IN ('active', 'inactive', 'sold_out')" in ddl
    assert _check_names("vendor_items") == {
        "ck_vendor_items_price_positive",
        "ck_vendor_items_quantity_non_negative",
        "ck_vendor_items_quality",
        "ck_vendor_items_status",
    }

    index = next(i for i in VendorItem.__table__.indexes if i.name == "ix_vendor_items_name_search")
    index_ddl = str(CreateIndex(index).compile(dialect=postgresql.dialect()))
    assert "USING gin" in index_ddl
    assert "to_tsvector('english', name || ' ' || COALESCE(description, ''))" in index_ddl
