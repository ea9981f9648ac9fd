"""
Error taxonomy for the blog backend.

Every failure a use case can report inherits from BlogError and carries the
user-facing ``message`` returned as ``msg`` plus the HTTP status the API
layer maps it to.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlogError(Exception):
    """Base exception for all expected blog backend failures."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------


class ValidationError(BlogError):
    """Raised when a request is malformed or a field is out of range."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(BlogError):
    """Raised when a user or post does not exist."""

    status_code = 404
    default_message = "Not found"


class ConstraintViolationError(BlogError):
    """Raised when the store rejects a write (duplicate email)."""

    status_code = 409
    default_message = "User with this email already exists"


# -----------------------------------------------------------------------------
# Session
# -----------------------------------------------------------------------------


class AlreadyAuthenticatedError(BlogError):
    """Raised on login while a session cookie is already present."""

    status_code = 409
    default_message = "Session already exists"


class UnauthenticatedError(BlogError):
    """Raised when a protected post operation is called without a session."""

    status_code = 401
    default_message = "You are not logged in"


class NoSessionError(UnauthenticatedError):
    """Raised by logout / me when there is no session cookie."""

    default_message = "No session exists"


class InvalidTokenError(BlogError):
    """Raised when the session token is tampered, foreign or expired."""

    status_code = 401
    default_message = "Invalid or expired token"


class InvalidCredentialsError(BlogError):
    """Raised when the password does not match the stored hash."""

    status_code = 401
    default_message = "Wrong password"


class ForbiddenError(BlogError):
    """Raised when the session user does not own the target post."""

    status_code = 403
    default_message = "Forbidden"


# -----------------------------------------------------------------------------
# Service
# -----------------------------------------------------------------------------


class ServiceUnavailableError(BlogError):
    """Raised when a request arrives before the store handle is ready."""

    status_code = 503
    default_message = "Service is starting"
