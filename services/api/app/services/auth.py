"""Demo authentication service.

Any credentials are accepted: login and registration only check that the
required fields are present, then hand back a fixed demo token and user.
"Present" follows JavaScript truthiness: missing, null, false, 0, NaN and the
empty string are absent; any other value (including [] and {}) is present.
"""

from typing import Any

from app.schemas import AuthData, DemoUser, LoginRequest, RegisterRequest
from app.services.domain import BusinessType, LanguageCode

DEMO_ACCESS_TOKEN = "demo-jwt-token-12345"
DEMO_REFRESH_TOKEN = "demo-refresh-token-67890"
DEMO_VENDOR_NAME = "Demo Vendor"

LOGIN_SUCCESS_MESSAGE = "Login successful (demo mode)"
REGISTER_SUCCESS_MESSAGE = "Registration successful (demo mode)"
LOGOUT_SUCCESS_MESSAGE = "Logout successful (demo mode)"


class AuthValidationError(ValueError):
    """Raised when required credential fields are missing."""


def is_present(value: Any) -> bool:
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and value != value:
        return False
    return bool(value)


def demo_login(request: LoginRequest) -> AuthData:
    """Accept any email/password pair.

    Raises:
        AuthValidationError: If email or password is missing.
    """
    if not (is_present(request.email) and is_present(request.password)):
        raise AuthValidationError("Email and password are required")

    return AuthData(
        token=DEMO_ACCESS_TOKEN,
        refresh_token=DEMO_REFRESH_TOKEN,
        user=DemoUser(
            id="demo-user-1",
            email=request.email,
            name=DEMO_VENDOR_NAME,
            vendor_id="vendor-demo-1",
            preferred_language=LanguageCode.ENGLISH.value,
            business_type=BusinessType.TRADER.value,
        ),
    )


def demo_register(request: RegisterRequest) -> AuthData:
    """Pretend to register a vendor. businessType defaults to trader.

    Raises:
        AuthValidationError: If email, password or name is missing.
    """
    if not all(is_present(v) for v in (request.email, request.password, request.name)):
        raise AuthValidationError("Email, password, and name are required")

    return AuthData(
        token=DEMO_ACCESS_TOKEN,
        user=DemoUser(
            id="demo-user-new",
            email=request.email,
            name=request.name,
            vendor_id="vendor-demo-new",
            preferred_language=LanguageCode.ENGLISH.value,
            business_type=(
                request.business_type if is_present(request.business_type) else BusinessType.TRADER.value
            ),
        ),
    )
