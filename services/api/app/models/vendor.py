"""Vendor models.

A vendor is a registered marketplace participant (farmer, trader,
wholesaler or retailer) trading at a mandi. Verification documents,
refresh tokens and moderation flags hang off the vendor row and are
removed with it.
"""

from datetime import datetime
from decimal import Decimal
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.services.domain import BusinessType, LanguageCode, VerificationStatus, sql_in
from app.stores.postgres import Base


def _uuid_pk() -> Mapped[uuid.UUID]:
    return mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )


class Vendor(Base):
    """Registered marketplace participant."""

    __tablename__ = "vendors"
    __table_args__ = (
        CheckConstraint(sql_in("business_type", BusinessType), name="business_type"),
        CheckConstraint(sql_in("verification_status", VerificationStatus), name="verification_status"),
        CheckConstraint("trust_score >= 0 AND trust_score <= 5", name="trust_score_range"),
        Index("ix_vendors_location", "state", "district", "market"),
    )

    id: Mapped[uuid.UUID] = _uuid_pk()

    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(20), unique=True)

    # Location
    state: Mapped[str] = mapped_column(String(50))
    district: Mapped[str] = mapped_column(String(50))
    market: Mapped[str] = mapped_column(String(100))
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 8))
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(11, 8))

    # Language preferences
    preferred_language: Mapped[str] = mapped_column(
        String(10),
        default=LanguageCode.HINDI.value,
        server_default=LanguageCode.HINDI.value,
    )
    secondary_languages: Mapped[list[str] | None] = mapped_column(ARRAY(Text))

    # Business information
    business_type: Mapped[str] = mapped_column(String(20), index=True)
    verification_status: Mapped[str] = mapped_column(
        String(20),
        default=VerificationStatus.PENDING.value,
        server_default=VerificationStatus.PENDING.value,
        index=True,
    )
    trust_score: Mapped[Decimal] = mapped_column(
        Numeric(3, 2),
        default=Decimal("0.00"),
        server_default=text("0.00"),
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Vendor {self.email} ({self.business_type})>"


class VerificationDocument(Base):
    """Identity / business document uploaded for vendor verification."""

    __tablename__ = "verification_documents"
    __table_args__ = (
        CheckConstraint(sql_in("verification_status", VerificationStatus), name="verification_status"),
    )

    id: Mapped[uuid.UUID] = _uuid_pk()
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
    )

    # e.g. "aadhar", "pan", "business_license"
    document_type: Mapped[str] = mapped_column(String(50))
    document_number: Mapped[str | None] = mapped_column(String(100))
    document_url: Mapped[str | None] = mapped_column(String(500))

    verification_status: Mapped[str] = mapped_column(
        String(20),
        default=VerificationStatus.PENDING.value,
        server_default=VerificationStatus.PENDING.value,
    )
    # Admin vendor who reviewed the document
    verified_by: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("vendors.id"))
    verification_notes: Mapped[str | None] = mapped_column(Text)

    uploaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class RefreshToken(Base):
    """Hashed JWT refresh token issued to a vendor."""

    __tablename__ = "refresh_tokens"

    id: Mapped[uuid.UUID] = _uuid_pk()
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        index=True,
    )
    token_hash: Mapped[str] = mapped_column(String(255))
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    is_revoked: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class VendorFlag(Base):
    """Moderation flag raised against a vendor.

    At most one unresolved flag per (vendor, flag_type).
    """

    __tablename__ = "vendor_flags"
    __table_args__ = (
        Index(
            "uq_vendor_flags_active_vendor_type",
            "vendor_id",
            "flag_type",
            unique=True,
            postgresql_where=text("is_resolved = false"),
        ),
    )

    id: Mapped[uuid.UUID] = _uuid_pk()
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        index=True,
    )
    # e.g. "low_rating", "suspicious_activity", "verification_issue"
    flag_type: Mapped[str] = mapped_column(String(50), index=True)
    flag_reason: Mapped[str | None] = mapped_column(Text)

    is_resolved: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=text("false"),
        index=True,
    )
    resolved_by: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), ForeignKey("vendors.id"))
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
