"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from buildlog.shared.core.logging import logger, get_logger
    from buildlog.shared.core.exceptions import BuildlogException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from buildlog.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from buildlog.shared.core.exceptions import (
    BuildlogException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ProjectNotFoundError,
    CheckInNotFoundError,
    UploadNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    PersistenceError,
    StorageError,
    ObjectExistsError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "BuildlogException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ProjectNotFoundError",
    "CheckInNotFoundError",
    "UploadNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "PersistenceError",
    "StorageError",
    "ObjectExistsError",
]
