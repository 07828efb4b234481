"""
API Handlers

Route handlers for the Buildlog API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

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

__all__ = [
    "auth_handler",
    "check_in_handler",
    "dashboard_handler",
    "debug_handler",
    "health_handler",
    "project_handler",
    "settings_handler",
    "upload_handler",
]
