"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Authentication (register, login, me)
    /dashboard              → Landing-page summary
    /projects               → Project CRUD
    /check-ins              → Check-ins, history, prompts
    /uploads                → Media staging
    /settings               → Business/audience profile
    /debug                  → Storage diagnostics (DEBUG_ENDPOINTS_ENABLED only)

Usage:
======
    from buildlog.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from buildlog.api.handlers import (
    auth_handler,
    check_in_handler,
    dashboard_handler,
    debug_handler,
    health_handler,
    project_handler,
    settings_handler,
    upload_handler,
)
from buildlog.config.settings import settings


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    app.include_router(
        dashboard_handler.router,
        prefix="/dashboard",
        tags=["Dashboard"],
    )

    app.include_router(
        project_handler.router,
        prefix="/projects",
        tags=["Projects"],
    )

    app.include_router(
        check_in_handler.router,
        prefix="/check-ins",
        tags=["Check-ins"],
    )

    app.include_router(
        upload_handler.router,
        prefix="/uploads",
        tags=["Uploads"],
    )

    app.include_router(
        settings_handler.router,
        prefix="/settings",
        tags=["Settings"],
    )

    if settings.DEBUG_ENDPOINTS_ENABLED:
        app.include_router(
            debug_handler.router,
            prefix="/debug",
            tags=["Debug"],
        )
