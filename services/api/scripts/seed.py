#!/usr/bin/env python3
"""Seed database with demo data.

Creates:
- The demo vendor served by the profile endpoint (password "password")
- Its language and analytics preferences
- The AGMARKNET market integration
- Today's market_data rows for the demo price catalogue (Pune Mandi)

The script is idempotent: rows that already exist are left untouched.

Usage:
    cd services/api
    python -m scripts.seed
"""

import asyncio
import os
import sys
from datetime import date
from decimal import Decimal

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import LanguagePreference, MarketData, MarketIntegration, Vendor, VendorAnalyticsPreferences
from app.services.domain import DeliveryMethod, FileFormat, Level, PeriodType
from app.services.price_discovery import DEFAULT_SOURCE, PRICE_CATALOGUE
from app.services.vendors import get_demo_profile
from app.stores.postgres import close_db, get_session, init_db

load_dotenv()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEMO_PASSWORD = "password"

MARKET_INTEGRATIONS = [
    {
        "source_name": DEFAULT_SOURCE,
        "api_endpoint": "https://agmarknet.gov.in/api",
        "update_frequency_minutes": 15,
    },
]


async def seed_database() -> None:
    await init_db()
    try:
        # get_session() commits on exit
        async with get_session() as session:
            print("🌱 Seeding database...")

            print("\n👤 Creating demo vendor...")
            vendor = await seed_demo_vendor(session)

            print("\n🗣️  Creating vendor preferences...")
            await seed_vendor_preferences(session, vendor)

            print("\n📈 Creating market integrations...")
            await seed_market_integrations(session)

            print("\n🌾 Creating market data...")
            await seed_market_data(session, vendor)

        print("\n✅ Database seeded successfully!")
    finally:
        await close_db()


async def seed_demo_vendor(session: AsyncSession) -> Vendor:
    profile = get_demo_profile("demo")

    result = await session.execute(select(Vendor).where(Vendor.email == profile.email))
    existing = result.scalar_one_or_none()
    if existing:
        print(f"  ⏭️  {profile.email} (exists)")
        return existing

    vendor = Vendor(
        name=profile.name,
        email=profile.email,
        password_hash=pwd_context.hash(DEMO_PASSWORD),
        phone=profile.phone,
        state=profile.location.state,
        district=profile.location.district,
        market=profile.location.market,
        preferred_language=profile.preferred_language.value,
        secondary_languages=[code.value for code in profile.secondary_languages],
        business_type=profile.business_type.value,
        verification_status=profile.verification_status.value,
        trust_score=Decimal(str(profile.trust_score)),
    )
    session.add(vendor)
    await session.flush()
    print(f"  ✅ {vendor.email} ({vendor.id})")
    return vendor


async def seed_vendor_preferences(session: AsyncSession, vendor: Vendor) -> None:
    result = await session.execute(
        select(LanguagePreference).where(LanguagePreference.vendor_id == vendor.id)
    )
    if result.scalar_one_or_none():
        print("  ⏭️  language preference (exists)")
    else:
        session.add(
            LanguagePreference(
                vendor_id=vendor.id,
                preferred_language=vendor.preferred_language,
                secondary_languages=vendor.secondary_languages,
            )
        )
        print(f"  ✅ language preference ({vendor.preferred_language})")

    if await session.get(VendorAnalyticsPreferences, vendor.id):
        print("  ⏭️  analytics preferences (exists)")
    else:
        session.add(
            VendorAnalyticsPreferences(
                vendor_id=vendor.id,
                preferred_delivery_method=DeliveryMethod.EMAIL.value,
                insight_frequency=PeriodType.WEEKLY.value,
                export_format_preference=FileFormat.CSV.value,
            )
        )
        print("  ✅ analytics preferences")

    await session.flush()


async def seed_market_integrations(session: AsyncSession) -> None:
    for m in MARKET_INTEGRATIONS:
        result = await session.execute(
            select(MarketIntegration).where(MarketIntegration.source_name == m["source_name"])
        )
        if result.scalar_one_or_none():
            print(f"  ⏭️  {m['source_name']} (exists)")
            continue

        session.add(
            MarketIntegration(
                source_name=m["source_name"],
                api_endpoint=m["api_endpoint"],
                update_frequency_minutes=m["update_frequency_minutes"],
            )
        )
        print(f"  ✅ {m['source_name']}")


async def seed_market_data(session: AsyncSession, vendor: Vendor) -> None:
    today = date.today()

    for item in PRICE_CATALOGUE:
        result = await session.execute(
            select(MarketData).where(
                MarketData.commodity == item.commodity,
                MarketData.market == vendor.market,
                MarketData.observed_on == today,
            )
        )
        if result.scalar_one_or_none():
            print(f"  ⏭️  {item.commodity} (exists)")
            continue

        session.add(
            MarketData(
                commodity=item.commodity,
                market=vendor.market,
                state=vendor.state,
                observed_on=today,
                min_price=Decimal(str(item.price_range.min)),
                max_price=Decimal(str(item.price_range.max)),
                modal_price=Decimal(str(item.price_range.modal)),
                sources=item.sources,
                # Catalogue volatility is a percentage
                volatility=(Decimal(str(item.volatility)) / 100).quantize(Decimal("0.0001")),
                data_quality=Level.HIGH.value,
            )
        )
        print(f"  ✅ {item.commodity} ({item.current_price} INR/quintal)")


if __name__ == "__main__":
    asyncio.run(seed_database())
