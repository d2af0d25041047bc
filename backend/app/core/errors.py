"""
Application error taxonomy.

Services raise these; the handlers registered in ``app.main`` render every
one of them as ``{"error": <message>}`` with the matching status code.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(AppError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class ConflictError(AppError):
    """Duplicate signup or duplicate registration."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class UnauthenticatedError(AppError):
    """No bearer token was presented."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class InvalidTokenError(UnauthenticatedError):
    """Malformed, badly signed or expired token."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class UnauthorizedError(AppError):
    """Valid identity without the required privilege."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin access required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(AppError):
    """A collection document could not be written."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage failure"
