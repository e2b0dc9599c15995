"""Trade models.

A trade session is the negotiation context between two or more vendors
over one commodity. Negotiations are the individual offers made inside a
session; trust ratings are left by participants once a session ends.
"""

from datetime import datetime
from decimal import Decimal
import uuid

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.services.domain import NegotiationStatus, TradeSessionStatus, sql_in
from app.stores.postgres import Base


class TradeSession(Base):
    """Negotiation context over a single commodity."""

    __tablename__ = "trade_sessions"
    __table_args__ = (
        CheckConstraint(sql_in("status", TradeSessionStatus), name="status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    commodity: Mapped[str] = mapped_column(String(100), index=True)
    status: Mapped[str] = mapped_column(
        String(20),
        default=TradeSessionStatus.ACTIVE.value,
        server_default=TradeSessionStatus.ACTIVE.value,
        index=True,
    )

    # Deal outcome (set when the session completes)
    final_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    quantity: Mapped[Decimal | None] = mapped_column(Numeric(10, 3))
    buyer_id: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("vendors.id"))
    seller_id: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("vendors.id"))

    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<TradeSession {self.commodity} ({self.status})>"


class SessionParticipant(Base):
    """Vendor membership in a trade session."""

    __tablename__ = "session_participants"

    session_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("trade_sessions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        primary_key=True,
    )
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class Negotiation(Base):
    """Single offer made by a vendor inside a trade session."""

    __tablename__ = "negotiations"
    __table_args__ = (
        CheckConstraint(sql_in("status", NegotiationStatus), name="status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    session_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("trade_sessions.id", ondelete="CASCADE"),
        index=True,
    )
    vendor_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id"),
        index=True,
    )

    offer_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 3))
    message: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(20),
        default=NegotiationStatus.PENDING.value,
        server_default=NegotiationStatus.PENDING.value,
        index=True,
    )

    # Assistant output stored alongside the offer
    ai_suggestion: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    market_justification: Mapped[str | None] = mapped_column(Text)
    cultural_context: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    responded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class TrustRating(Base):
    """Post-trade rating of one vendor by another (one per session pair)."""

    __tablename__ = "trust_ratings"
    __table_args__ = (
        UniqueConstraint(
            "rater_id",
            "rated_vendor_id",
            "session_id",
            name="uq_trust_ratings_rater_rated_session",
        ),
        CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
        CheckConstraint("delivery_rating >= 1 AND delivery_rating <= 5", name="delivery_rating_range"),
        CheckConstraint(
            "communication_rating >= 1 AND communication_rating <= 5",
            name="communication_rating_range",
        ),
        CheckConstraint("quality_rating >= 1 AND quality_rating <= 5", name="quality_rating_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    rater_id: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("vendors.id"))
    rated_vendor_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id"),
        index=True,
    )
    session_id: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("trade_sessions.id"))

    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), index=True)
    delivery_rating: Mapped[Decimal | None] = mapped_column(Numeric(2, 1))
    communication_rating: Mapped[Decimal | None] = mapped_column(Numeric(2, 1))
    quality_rating: Mapped[Decimal | None] = mapped_column(Numeric(2, 1))

    feedback: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
