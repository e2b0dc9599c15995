"""create_core_tables

Revision ID: a1c3e5f7b901
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b901"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LANGUAGE_CODES = "'hi', 'en', 'ta', 'te', 'bn', 'mr', 'gu', 'kn', 'ml', 'pa', 'or', 'as'"
VERIFICATION_STATUSES = "'pending', 'verified', 'rejected'"

# Tables whose updated_at column is bumped by trigger on every UPDATE.
UPDATED_AT_TABLES = (
    "vendors",
    "trade_sessions",
    "market_integrations",
    "vendor_flags",
    "language_preferences",
)


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=nullable,
    )


def upgrade() -> None:
    # gen_random_uuid() is built in from PostgreSQL 13; older servers need pgcrypto.
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "vendors",
        _uuid_pk(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column("state", sa.String(length=50), nullable=False),
        sa.Column("district", sa.String(length=50), nullable=False),
        sa.Column("market", sa.String(length=100), nullable=False),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        sa.Column("preferred_language", sa.String(length=10), server_default="hi", nullable=False),
        sa.Column("secondary_languages", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("business_type", sa.String(length=20), nullable=False),
        sa.Column("verification_status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("trust_score", sa.Numeric(3, 2), server_default=sa.text("0.00"), nullable=False),
        _timestamp("created_at"),
        _timestamp("last_active"),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            "business_type IN ('farmer', 'trader', 'wholesaler', 'retailer')",
            name="ck_vendors_business_type",
        ),
        sa.CheckConstraint(
            f"verification_status IN ({VERIFICATION_STATUSES})",
            name="ck_vendors_verification_status",
        ),
        sa.CheckConstraint("trust_score >= 0 AND trust_score <= 5", name="ck_vendors_trust_score_range"),
        sa.PrimaryKeyConstraint("id", name="pk_vendors"),
        sa.UniqueConstraint("email", name="uq_vendors_email"),
        sa.UniqueConstraint("phone", name="uq_vendors_phone"),
    )
    op.create_index("ix_vendors_location", "vendors", ["state", "district", "market"])
    op.create_index("ix_vendors_business_type", "vendors", ["business_type"])
    op.create_index("ix_vendors_verification_status", "vendors", ["verification_status"])
    op.create_index("ix_vendors_last_active", "vendors", ["last_active"])

    op.create_table(
        "verification_documents",
        _uuid_pk(),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("document_type", sa.String(length=50), nullable=False),
        sa.Column("document_number", sa.String(length=100), nullable=True),
        sa.Column("document_url", sa.String(length=500), nullable=True),
        sa.Column("verification_status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("verified_by", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("verification_notes", sa.Text(), nullable=True),
        _timestamp("uploaded_at"),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            f"verification_status IN ({VERIFICATION_STATUSES})",
            name="ck_verification_documents_verification_status",
        ),
        sa.ForeignKeyConstraint(
            ["vendor_id"],
            ["vendors.id"],
            name="fk_verification_documents_vendor_id_vendors",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["verified_by"],
            ["vendors.id"],
            name="fk_verification_documents_verified_by_vendors",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_verification_documents"),
    )

    op.create_table(
        "trade_sessions",
        _uuid_pk(),
        sa.Column("commodity", sa.String(length=100), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="active", nullable=False),
        sa.Column("final_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("quantity", sa.Numeric(10, 3), nullable=True),
        sa.Column("buyer_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("seller_id", postgresql.UUID(as_uuid=True), nullable=True),
        _timestamp("start_time"),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            "status IN ('active', 'completed', 'cancelled')",
            name="ck_trade_sessions_status",
        ),
        sa.ForeignKeyConstraint(["buyer_id"], ["vendors.id"], name="fk_trade_sessions_buyer_id_vendors"),
        sa.ForeignKeyConstraint(["seller_id"], ["vendors.id"], name="fk_trade_sessions_seller_id_vendors"),
        sa.PrimaryKeyConstraint("id", name="pk_trade_sessions"),
    )
    op.create_index("ix_trade_sessions_commodity", "trade_sessions", ["commodity"])
    op.create_index("ix_trade_sessions_status", "trade_sessions", ["status"])
    op.create_index("ix_trade_sessions_start_time", "trade_sessions", ["start_time"])

    op.create_table(
        "session_participants",
        sa.Column("session_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        _timestamp("joined_at"),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["trade_sessions.id"],
            name="fk_session_participants_session_id_trade_sessions",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["vendor_id"],
            ["vendors.id"],
            name="fk_session_participants_vendor_id_vendors",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("session_id", "vendor_id", name="pk_session_participants"),
    )

    op.create_table(
        "negotiations",
        _uuid_pk(),
        sa.Column("session_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("offer_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 3), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("ai_suggestion", sa.Numeric(10, 2), nullable=True),
        sa.Column("market_justification", sa.Text(), nullable=True),
        sa.Column("cultural_context", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'countered')",
            name="ck_negotiations_status",
        ),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["trade_sessions.id"],
            name="fk_negotiations_session_id_trade_sessions",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(["vendor_id"], ["vendors.id"], name="fk_negotiations_vendor_id_vendors"),
        sa.PrimaryKeyConstraint("id", name="pk_negotiations"),
    )
    op.create_index("ix_negotiations_session_id", "negotiations", ["session_id"])
    op.create_index("ix_negotiations_vendor_id", "negotiations", ["vendor_id"])
    op.create_index("ix_negotiations_status", "negotiations", ["status"])

    op.create_table(
        "trust_ratings",
        _uuid_pk(),
        sa.Column("rater_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("rated_vendor_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("session_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("rating", sa.Numeric(2, 1), nullable=False),
        sa.Column("delivery_rating", sa.Numeric(2, 1), nullable=True),
        sa.Column("communication_rating", sa.Numeric(2, 1), nullable=True),
        sa.Column("quality_rating", sa.Numeric(2, 1), nullable=True),
        sa.Column("feedback", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_trust_ratings_rating_range"),
        sa.CheckConstraint(
            "delivery_rating >= 1 AND delivery_rating <= 5",
            name="ck_trust_ratings_delivery_rating_range",
        ),
        sa.CheckConstraint(
            "communication_rating >= 1 AND communication_rating <= 5",
            name="ck_trust_ratings_communication_rating_range",
        ),
        sa.CheckConstraint(
            "quality_rating >= 1 AND quality_rating <= 5",
            name="ck_trust_ratings_quality_rating_range",
        ),
        sa.ForeignKeyConstraint(["rater_id"], ["vendors.id"], name="fk_trust_ratings_rater_id_vendors"),
        sa.ForeignKeyConstraint(
            ["rated_vendor_id"],
            ["vendors.id"],
            name="fk_trust_ratings_rated_vendor_id_vendors",
        ),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["trade_sessions.id"],
            name="fk_trust_ratings_session_id_trade_sessions",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_trust_ratings"),
        sa.UniqueConstraint(
            "rater_id",
            "rated_vendor_id",
            "session_id",
            name="uq_trust_ratings_rater_rated_session",
        ),
    )
    op.create_index("ix_trust_ratings_rated_vendor_id", "trust_ratings", ["rated_vendor_id"])
    op.create_index("ix_trust_ratings_rating", "trust_ratings", ["rating"])

    op.create_table(
        "market_integrations",
        _uuid_pk(),
        sa.Column("source_name", sa.String(length=50), nullable=False),
        sa.Column("api_endpoint", sa.String(length=255), nullable=False),
        sa.Column("api_key_hash", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("update_frequency_minutes", sa.Integer(), server_default=sa.text("15"), nullable=False),
        sa.Column("last_sync", sa.DateTime(timezone=True), nullable=True),
        sa.Column("success_rate", sa.Numeric(5, 2), server_default=sa.text("100.00"), nullable=False),
        sa.Column("avg_response_time_ms", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id", name="pk_market_integrations"),
        sa.UniqueConstraint("source_name", name="uq_market_integrations_source_name"),
    )

    op.create_table(
        "refresh_tokens",
        _uuid_pk(),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("token_hash", sa.String(length=255), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_revoked", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["vendor_id"],
            ["vendors.id"],
            name="fk_refresh_tokens_vendor_id_vendors",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_refresh_tokens"),
    )
    op.create_index("ix_refresh_tokens_vendor_id", "refresh_tokens", ["vendor_id"])
    op.create_index("ix_refresh_tokens_expires_at", "refresh_tokens", ["expires_at"])

    op.create_table(
        "vendor_flags",
        _uuid_pk(),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("flag_type", sa.String(length=50), nullable=False),
        sa.Column("flag_reason", sa.Text(), nullable=True),
        sa.Column("is_resolved", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("resolved_by", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["vendor_id"],
            ["vendors.id"],
            name="fk_vendor_flags_vendor_id_vendors",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(["resolved_by"], ["vendors.id"], name="fk_vendor_flags_resolved_by_vendors"),
        sa.PrimaryKeyConstraint("id", name="pk_vendor_flags"),
    )
    op.create_index("ix_vendor_flags_vendor_id", "vendor_flags", ["vendor_id"])
    op.create_index("ix_vendor_flags_flag_type", "vendor_flags", ["flag_type"])
    op.create_index("ix_vendor_flags_is_resolved", "vendor_flags", ["is_resolved"])
    # One open flag per vendor and flag type; resolved flags may repeat.
    op.create_index(
        "uq_vendor_flags_active_vendor_type",
        "vendor_flags",
        ["vendor_id", "flag_type"],
        unique=True,
        postgresql_where=sa.text("is_resolved = false"),
    )

    op.create_table(
        "language_preferences",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vendor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("preferred_language", sa.String(length=10), nullable=False),
        sa.Column("secondary_languages", postgresql.ARRAY(sa.Text()), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            f"preferred_language IN ({LANGUAGE_CODES})",
            name="ck_language_preferences_preferred_language",
        ),
        sa.ForeignKeyConstraint(
            ["vendor_id"],
            ["vendors.id"],
            name="fk_language_preferences_vendor_id_vendors",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_language_preferences"),
    )
    op.create_index("ix_language_preferences_vendor_id", "language_preferences", ["vendor_id"], unique=True)
    op.create_index("ix_language_preferences_preferred_language", "language_preferences", ["preferred_language"])

    op.execute(
        """
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = CURRENT_TIMESTAMP;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
        """
    )
    for table in UPDATED_AT_TABLES:
        op.execute(
            f"CREATE TRIGGER update_{table}_updated_at BEFORE UPDATE ON {table} "
            "FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()"
        )


def downgrade() -> None:
    for table in UPDATED_AT_TABLES:
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.drop_table("language_preferences")
    op.drop_table("vendor_flags")
    op.drop_table("refresh_tokens")
    op.drop_table("market_integrations")
    op.drop_table("trust_ratings")
    op.drop_table("negotiations")
    op.drop_table("session_participants")
    op.drop_table("trade_sessions")
    op.drop_table("verification_documents")
    op.drop_table("vendors")

    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
