"""API routes."""

from fastapi import APIRouter

from app.routes import auth, price_discovery, system, translation, vendors

api_router = APIRouter(prefix="/api/v1")

# Connectivity check for the frontend
api_router.include_router(system.router, tags=["system"])

# Commodity prices
api_router.include_router(price_discovery.router, prefix="/price-discovery", tags=["price-discovery"])

# Translation (demo)
api_router.include_router(translation.router, prefix="/translation", tags=["translation"])

# Authentication (demo)
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Vendor profiles
api_router.include_router(vendors.router, prefix="/vendors", tags=["vendors"])
