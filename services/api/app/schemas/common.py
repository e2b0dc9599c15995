"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "success": false, "error": str, "details": list | null }
    """

    success: bool = False
    error: str
    details: list[dict[str, Any]] | None = None


class NotFoundResponse(BaseModel):
    """Body returned for unknown /api/ paths."""

    error: str = "API endpoint not found"


class MessageResponse(BaseModel):
    """Bare acknowledgement (logout, connectivity test)."""

    success: bool = True
    message: str
