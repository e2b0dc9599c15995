"""Language preference model.

Per-vendor language settings used by the translation service.
"""

from datetime import datetime
import uuid

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.services.domain import LanguageCode, sql_in
from app.stores.postgres import Base


class LanguagePreference(Base):
    __tablename__ = "language_preferences"
    __table_args__ = (
        CheckConstraint(sql_in("preferred_language", LanguageCode), name="preferred_language"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    vendor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        unique=True,
        index=True,
    )
    preferred_language: Mapped[str] = mapped_column(String(10), index=True)
    secondary_languages: Mapped[list[str] | None] = mapped_column(ARRAY(Text))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
