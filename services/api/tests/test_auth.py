"""Tests for demo login / registration / logout."""

import pytest
from httpx import AsyncClient

from app.schemas import LoginRequest, RegisterRequest
from app.services.auth import DEMO_ACCESS_TOKEN, AuthValidationError, demo_login, demo_register, is_present


@pytest.mark.asyncio
async def test_login_with_credentials_returns_demo_token(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "vendor@mandi.com", "password": "123456"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Login successful (demo mode)"
    assert data["data"]["token"] == "demo-jwt-token-12345"
    assert data["data"]["refreshToken"] == "demo-refresh-token-67890"
    assert data["data"]["user"] == {
        "id": "demo-user-1",
        "email": "vendor@mandi.com",
        "name": "Demo Vendor",
        "vendorId": "vendor-demo-1",
        "preferredLanguage": "en",
        "businessType": "trader",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"email": "vendor@mandi.com"},
        {"password": "123456"},
        {"email": "", "password": "123456"},
        {"email": "vendor@mandi.com", "password": None},
        {},
    ],
)
async def test_login_missing_field_returns_400(client: AsyncClient, body: dict):
    response = await client.post("/api/v1/auth/login", json=body)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email and password are required"}


@pytest.mark.asyncio
async def test_login_without_body_returns_400(client: AsyncClient):
    response = await client.post("/api/v1/auth/login")
    assert response.status_code == 400
    assert response.json()["error"] == "Email and password are required"


@pytest.mark.asyncio
async def test_register_defaults_business_type_to_trader(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "new@mandi.com", "password": "secret", "name": "Ravi"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Registration successful (demo mode)"
    assert data["data"]["token"] == DEMO_ACCESS_TOKEN
    assert "refreshToken" not in data["data"]
    user = data["data"]["user"]
    assert user["id"] == "demo-user-new"
    assert user["vendorId"] == "vendor-demo-new"
    assert user["name"] == "Ravi"
    assert user["email"] == "new@mandi.com"
    assert user["businessType"] == "trader"
    assert user["preferredLanguage"] == "en"


@pytest.mark.asyncio
async def test_register_echoes_business_type(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "f@mandi.com", "password": "secret", "name": "Asha", "businessType": "farmer"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["user"]["businessType"] == "farmer"


@pytest.mark.asyncio
async def test_register_missing_name_returns_400(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "new@mandi.com", "password": "secret"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email, password, and name are required"}


@pytest.mark.asyncio
async def test_logout(client: AsyncClient):
    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logout successful (demo mode)"}


@pytest.mark.asyncio
async def test_login_malformed_json_returns_400(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_demo_login_raises_on_missing_password():
    with pytest.raises(AuthValidationError):
        demo_login(LoginRequest(email="a@b.c"))


def test_demo_register_accepts_alias_and_field_name():
    by_alias = demo_register(RegisterRequest.model_validate(
        {"email": "a@b.c", "password": "x", "name": "N", "businessType": "retailer"}
    ))
    by_name = demo_register(RegisterRequest(email="a@b.c", password="x", name="N", business_type="retailer"))
    assert by_alias.user.business_type == by_name.user.business_type == "retailer"


@pytest.mark.asyncio
async def test_login_accepts_numeric_password(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "vendor@mandi.com", "password": 123456},
    )
    assert response.status_code == 200
    assert response.json()["data"]["user"]["email"] == "vendor@mandi.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("password", [0, False])
async def test_login_falsy_password_returns_400(client: AsyncClient, password):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "vendor@mandi.com", "password": password},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Email and password are required"


@pytest.mark.asyncio
async def test_register_echoes_non_string_values(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "n@mandi.com", "password": 42, "name": 7, "businessType": ""},
    )
    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["name"] == 7
    assert user["businessType"] == "trader"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        (0, False),
        (0.0, False),
        (False, False),
        (float("nan"), False),
        ("x", True),
        (123456, True),
        (True, True),
        ([], True),
        ({}, True),
    ],
)
def test_is_present_follows_javascript_truthiness(value, expected):
    assert is_present(value) is expected
