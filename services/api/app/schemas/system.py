"""Schemas for service-level endpoints (health, connectivity, banner)."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime
    service: str
    version: str
    message: str


class ConnectivityResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


class DemoCredential(BaseModel):
    email: str
    password: str


class DemoCredentials(BaseModel):
    note: str
    examples: list[DemoCredential]


class ServerInfo(BaseModel):
    """Banner returned for non-API GET requests."""

    message: str
    version: str
    status: str = "Running"
    endpoints: dict[str, str]
    demo_credentials: DemoCredentials = Field(alias="demoCredentials")
    note: str

    model_config = {"populate_by_name": True}
