"""Demo authentication endpoints.

Any non-empty credentials are accepted. Missing fields yield
400 { "success": false, "error": "..." }.
"""

import logging

from fastapi import APIRouter, HTTPException

from app.schemas import AuthResponse, ErrorResponse, LoginRequest, MessageResponse, RegisterRequest
from app.services.auth import (
    LOGIN_SUCCESS_MESSAGE,
    LOGOUT_SUCCESS_MESSAGE,
    REGISTER_SUCCESS_MESSAGE,
    AuthValidationError,
    demo_login,
    demo_register,
)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}},
)
async def login(request: LoginRequest | None = None) -> AuthResponse:
    """Log in with any email/password combination."""
    request = request or LoginRequest()
    try:
        data = demo_login(request)
    except AuthValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"[auth] demo login email={request.email}")
    return AuthResponse(data=data, message=LOGIN_SUCCESS_MESSAGE)


@router.post(
    "/register",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def register(request: RegisterRequest | None = None) -> AuthResponse:
    """Register a vendor (nothing is persisted in demo mode)."""
    request = request or RegisterRequest()
    try:
        data = demo_register(request)
    except AuthValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"[auth] demo register email={request.email} business_type={data.user.business_type}")
    return AuthResponse(data=data, message=REGISTER_SUCCESS_MESSAGE)


@router.post("/logout", response_model=MessageResponse)
async def logout() -> MessageResponse:
    return MessageResponse(message=LOGOUT_SUCCESS_MESSAGE)
