"""Vendor profile service (demo).

Every vendor ID resolves to the same demo trader from Pune Mandi; only the
`id` field reflects the requested vendor.
"""

from app.schemas import VendorProfile
from app.schemas.vendor import Location, TradingHistory
from app.services.domain import BusinessType, LanguageCode, VerificationStatus


def get_demo_profile(vendor_id: str) -> VendorProfile:
    return VendorProfile(
        id=vendor_id,
        name="Demo Vendor",
        email="demo@example.com",
        phone="+91-9876543210",
        business_type=BusinessType.TRADER,
        location=Location(state="Maharashtra", district="Pune", market="Pune Mandi"),
        preferred_language=LanguageCode.ENGLISH,
        secondary_languages=[LanguageCode.HINDI, LanguageCode.MARATHI],
        trust_score=4.2,
        verification_status=VerificationStatus.VERIFIED,
        trading_history=TradingHistory(
            total_trades=156,
            successful_trades=148,
            average_rating=4.2,
        ),
    )
