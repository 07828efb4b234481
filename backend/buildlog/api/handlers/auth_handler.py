"""
Authentication Handler

Handles user registration, login and the current-identity endpoint.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Domain errors
(duplicate email, bad credentials) propagate to the global exception
handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from buildlog.api.dependencies import CurrentUser
from buildlog.api.dependencies.services import get_auth_service
from buildlog.shared.models.user import User
from buildlog.shared.schemas.user import (
    AuthResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)
from buildlog.shared.services.auth_service import AuthService


router = APIRouter()


def _build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        email=user.email,
        created_at=user.created_at,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        409: If email already registered
    """
    user, access_token, expires_in = await auth_service.register_user(
        email=user_data.email,
        password=user_data.password,
    )

    return AuthResponse(
        user=_build_user_response(user),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )

    return AuthResponse(
        user=_build_user_response(user),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the account behind the bearer token."""
    user = await auth_service.get_user(UUID(current_user["user_id"]))
    return _build_user_response(user)
