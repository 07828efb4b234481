"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Services: get_*_service() functions, get_storage()

Usage:
======
    from buildlog.api.dependencies import CurrentUser

    @router.get("/check-ins")
    async def list_check_ins(current_user: CurrentUser, ...):
        ...
"""

from buildlog.api.dependencies.database import (
    get_db,
    DbSession,
)
from buildlog.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    CurrentUser,
)
from buildlog.api.dependencies.services import get_storage

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "CurrentUser",
    # Storage
    "get_storage",
]
