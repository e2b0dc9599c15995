"""Vendor profile endpoints."""

from fastapi import APIRouter, Path

from app.schemas import VendorProfileResponse
from app.schemas.vendor import VendorProfileData
from app.services.vendors import get_demo_profile

router = APIRouter()


@router.get("/profile/{vendor_id}", response_model=VendorProfileResponse)
async def get_vendor_profile(
    vendor_id: str = Path(description="Vendor identifier; echoed back as the profile id"),
) -> VendorProfileResponse:
    """Get a vendor's public profile.

    In demo mode every ID returns the same profile with `id` set to the requested ID.
    """
    return VendorProfileResponse(data=VendorProfileData(profile=get_demo_profile(vendor_id)))
