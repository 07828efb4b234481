"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Check-in not found",
            "details": {"resource_id": "abc-123"}
        }
    }

Exception Handling:
===================
1. BuildlogException subclasses → Use their status_code and to_dict()
2. Request body/query validation → 422 with validation details
3. Pydantic ValidationError      → 400 with validation details
4. Other exceptions              → 500 with generic message (details logged only)
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from buildlog.shared.core.exceptions import BuildlogException
from buildlog.shared.core.logging import logger
from buildlog.shared.schemas.common import ErrorDetail, ErrorResponse


def error_content(code: str, message: str, details: Optional[dict[str, Any]] = None) -> dict:
    """Render the standard error envelope."""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    ).model_dump()


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(BuildlogException)
    async def buildlog_exception_handler(
        request: Request,
        exc: BuildlogException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        Server-side failures (5xx) are logged at error level, client
        errors at warning level.
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies or query parameters that don't match the schema."""
        errors = jsonable_encoder(exc.errors())
        logger.warning("Request validation error", errors=errors, path=request.url.path)
        return JSONResponse(
            status_code=422,
            content=error_content(
                "VALIDATION_ERROR", "Request validation failed", {"errors": errors}
            ),
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        errors = jsonable_encoder(exc.errors())
        logger.warning("Validation error", errors=errors, path=request.url.path)
        return JSONResponse(
            status_code=400,
            content=error_content(
                "VALIDATION_ERROR", "Request validation failed", {"errors": errors}
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=error_content("INTERNAL_ERROR", "An unexpected error occurred"),
        )
