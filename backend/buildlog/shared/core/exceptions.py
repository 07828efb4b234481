"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    BuildlogException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid credentials, token expired
       ├── AuthorizationError (403)     ← Access denied
       ├── NotFoundError (404)          ← Resource not found
       │      ├── ProjectNotFoundError
       │      ├── CheckInNotFoundError
       │      └── UploadNotFoundError
       ├── ValidationError (400)        ← Invalid input data (checked before any write)
       ├── ConflictError (409)          ← Resource already exists
       │      └── DuplicateResourceError
       ├── PersistenceError (500)       ← A database write failed mid-operation
       └── StorageError (502)           ← Object storage rejected an operation

Usage:
======
    from buildlog.shared.core.exceptions import NotFoundError, ValidationError

    raise ProjectNotFoundError(str(project_id))
    # {"error": {"code": "NOT_FOUND", "message": "Project with id 'abc' not found"}}

    raise ValidationError("Project name is required", details={"field": "name"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Check-in with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class BuildlogException(Exception):
    """
    Base exception for all Buildlog application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(BuildlogException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - The Authorization header is missing
    - Token expired or malformed
    - Login credentials do not match
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(BuildlogException):
    """Authorization failed error (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(BuildlogException):
    """
    Resource not found error (404 Not Found).

    Rows owned by another user are reported as not found too.

    Example:
        raise NotFoundError("Project", project_id)
        # Message: "Project with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ProjectNotFoundError(NotFoundError):
    """Project not found error."""

    def __init__(self, project_id: str) -> None:
        super().__init__(resource="Project", resource_id=project_id)


class CheckInNotFoundError(NotFoundError):
    """Check-in not found error."""

    def __init__(self, check_in_id: str) -> None:
        super().__init__(resource="Check-in", resource_id=check_in_id)


class UploadNotFoundError(NotFoundError):
    """Upload not found error."""

    def __init__(self, upload_id: str) -> None:
        super().__init__(resource="Upload", resource_id=upload_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(BuildlogException):
    """
    Validation error (400 Bad Request).

    Raised before any network or database call when input is unusable,
    e.g. a blank project name.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(BuildlogException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Duplicate resource error."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# BACKEND ERRORS (500, 502)
# ═══════════════════════════════════════════════════════════════════════════════


class PersistenceError(BuildlogException):
    """
    A database read or write failed (500).

    The backend's own message is interpolated so the client can show it,
    e.g. "Failed to save check-in: duplicate key value ...".
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="PERSISTENCE_ERROR",
            details=details,
        )


class StorageError(BuildlogException):
    """
    Object storage rejected an upload or URL request (502 Bad Gateway).

    Cleanup removals never raise this; they are logged and skipped.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=502,
            error_code="STORAGE_ERROR",
            details=details,
        )


class ObjectExistsError(StorageError):
    """A conditional upload found an object already at the key."""

    def __init__(
        self,
        message: str = "Object already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
