"""Service-level endpoints under /api/v1."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas import ConnectivityResponse

router = APIRouter()


@router.get("/test", response_model=ConnectivityResponse)
async def connectivity_test() -> ConnectivityResponse:
    """Confirm the frontend can reach the API."""
    return ConnectivityResponse(
        message="Frontend-Backend connection working!",
        timestamp=datetime.now(timezone.utc),
    )
