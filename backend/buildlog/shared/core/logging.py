"""
Logging Configuration

structlog on top of the standard logging module, configured once at import.

Output:
=======
    development   2024-05-01T09:15:02Z [info ] Check-in created  check_in_id=... request_id=...
    otherwise     {"event": "Check-in created", "level": "info", "request_id": "...", ...}

Request Context:
================
    bind_request_log_context (api/main.py)   request_id, method, path
    get_current_user (api/dependencies/auth) user_id

Both go through log_context(), so every line a request writes carries
them without passing ids down to services and repositories.

Usage:
======
    from buildlog.shared.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Project created", project_id=str(project.id))
    logger.warning("Object removal failed", path=path, error=str(e))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from buildlog.config.settings import settings


STORAGE_CLIENT_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development gets colored console output, every other environment
    gets one JSON object per line.

    Called automatically when this module is imported.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # The storage client logs every request and header at DEBUG
    for name in STORAGE_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in contextvars, so it stays with the current request
    until cleared.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("buildlog")
