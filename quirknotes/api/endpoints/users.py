"""
User API Endpoints.

Registration and login. Both return a bearer token valid for one hour.
"""

from fastapi import APIRouter

from quirknotes.core.dependencies import AuthServiceDep
from quirknotes.schemas.user import TokenResponse, UserCredentials

router = APIRouter()


@router.post(
    "/registerUser",
    response_model=TokenResponse,
    status_code=201,
    summary="Register a user",
    description="Create an account and receive a bearer token.",
)
async def register_user(
    service: AuthServiceDep,
    data: UserCredentials | None = None,
) -> TokenResponse:
    """Register a new user."""
    token = await service.register(data or UserCredentials())
    return TokenResponse(response="User registered successfully.", token=token)


@router.post(
    "/loginUser",
    response_model=TokenResponse,
    summary="Log in",
    description="Exchange a username and password for a bearer token.",
)
async def login_user(
    service: AuthServiceDep,
    data: UserCredentials | None = None,
) -> TokenResponse:
    """Log in an existing user."""
    token = await service.login(data or UserCredentials())
    return TokenResponse(response="User logged in successfully.", token=token)
