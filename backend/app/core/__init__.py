"""
Core module - Security, error taxonomy, and other core utilities.
"""
from app.core.errors import (
    AppError,
    ConflictError,
    InputValidationError,
    InvalidTokenError,
    NotFoundError,
    StorageError,
    UnauthenticatedError,
    UnauthorizedError,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
    verify_access_token,
)

__all__ = [
    "AppError",
    "ConflictError",
    "InputValidationError",
    "InvalidTokenError",
    "NotFoundError",
    "StorageError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "verify_access_token",
]
