"""Schemas for demo authentication (/api/v1/auth)."""

from typing import Any

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login body. Presence is checked by the service, not by the schema.

    Values are not type-checked: any JSON value that is present (a numeric
    password such as 123456, for instance) is accepted and echoed as sent.
    """

    email: Any = None
    password: Any = None


class RegisterRequest(BaseModel):
    email: Any = None
    password: Any = None
    name: Any = None
    business_type: Any = Field(default=None, alias="businessType")

    model_config = {"populate_by_name": True}


class DemoUser(BaseModel):
    """User payload returned alongside the demo token."""

    id: str
    email: Any
    name: Any
    vendor_id: str = Field(alias="vendorId")
    preferred_language: str = Field(alias="preferredLanguage")
    business_type: Any = Field(alias="businessType")

    model_config = {"populate_by_name": True}


class AuthData(BaseModel):
    token: str
    refresh_token: str | None = Field(default=None, alias="refreshToken")
    user: DemoUser

    model_config = {"populate_by_name": True}


class AuthResponse(BaseModel):
    """Response payload for login / register."""

    success: bool = True
    data: AuthData
    message: str
