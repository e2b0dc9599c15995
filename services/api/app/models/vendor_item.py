"""Vendor inventory model.

Items a vendor lists for sale, searchable by name, description and location.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
import uuid

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, func, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.services.domain import ItemQuality, ItemStatus, sql_in
from app.stores.postgres import Base


class VendorItem(Base):
    __tablename__ = "vendor_items"
    __table_args__ = (
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
        CheckConstraint(sql_in("quality", ItemQuality), name="quality"),
        CheckConstraint(sql_in("status", ItemStatus), name="status"),
        Index("ix_vendor_items_vendor_status", "vendor_id", "status"),
        Index("ix_vendor_items_category_status", "category", "status"),
        Index("ix_vendor_items_status_price", "status", "price"),
        Index("ix_vendor_items_created_at", text("created_at DESC")),
        Index(
            "ix_vendor_items_location_search",
            text("to_tsvector('english', location)"),
            postgresql_using="gin",
        ),
        Index(
            "ix_vendor_items_name_search",
            text("to_tsvector('english', name || ' ' || COALESCE(description, ''))"),
            postgresql_using="gin",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255))
    category: Mapped[str] = mapped_column(String(100), index=True)
    description: Mapped[str | None] = mapped_column(Text)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), index=True)
    # e.g. "quintal", "kg"
    unit: Mapped[str] = mapped_column(String(50))
    quantity: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    quality: Mapped[str] = mapped_column(String(20), index=True)
    location: Mapped[str] = mapped_column(String(255))
    images: Mapped[list[Any]] = mapped_column(
        JSONB,
        default=list,
        server_default=text("'[]'::jsonb"),
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=ItemStatus.ACTIVE.value,
        server_default=ItemStatus.ACTIVE.value,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<VendorItem {self.name} ({self.status})>"
