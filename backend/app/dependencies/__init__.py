"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentIdentity, get_current_identity
from app.dependencies.roles import require_admin

__all__ = [
    "CurrentIdentity",
    "get_current_identity",
    "require_admin",
]
