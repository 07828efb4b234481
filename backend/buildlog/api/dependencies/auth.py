"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Identity is resolved per request from the bearer token; there is no
process-wide session object.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← {"user_id", "email"} for the request

Type Aliases:
=============
    CurrentUser - Authenticated user from JWT

Usage:
======
    from buildlog.api.dependencies.auth import CurrentUser

    @router.get("/projects")
    async def list_projects(current_user: CurrentUser):
        user_id = UUID(current_user["user_id"])
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from buildlog.config.settings import settings
from buildlog.shared.core.exceptions import AuthenticationError
from buildlog.shared.core.logging import log_context
from buildlog.shared.utils.security import SecurityUtils


# Missing credentials are reported by get_current_user_token as a 401
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Returns:
        Dict with ``user_id`` (str) and ``email``

    Raises:
        AuthenticationError: If the token carries no valid user id
    """
    user_id = token.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        UUID(user_id)
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    log_context(user_id=user_id)

    return {
        "user_id": user_id,
        "email": token.get("email") or "",
    }


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[dict, Depends(get_current_user)]
