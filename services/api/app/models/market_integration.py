"""Market integration model.

Configuration and health metrics for an external market price feed
(e.g. AGMARKNET). The API key is stored hashed, never in plain text.
"""

from datetime import datetime
from decimal import Decimal
import uuid

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, func, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.stores.postgres import Base


class MarketIntegration(Base):
    """External price source configuration."""

    __tablename__ = "market_integrations"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    source_name: Mapped[str] = mapped_column(String(50), unique=True)
    api_endpoint: Mapped[str] = mapped_column(String(255))
    api_key_hash: Mapped[str | None] = mapped_column(String(255))

    # Sync configuration
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"))
    update_frequency_minutes: Mapped[int] = mapped_column(Integer, default=15, server_default=text("15"))
    last_sync: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Data quality metrics
    success_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        default=Decimal("100.00"),
        server_default=text("100.00"),
    )
    avg_response_time_ms: Mapped[int | None] = mapped_column(Integer)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<MarketIntegration {self.source_name}>"
