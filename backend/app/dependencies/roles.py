"""
Admin access control dependencies.
"""
from typing import Callable

from fastapi import Depends

from app.core.errors import UnauthorizedError
from app.database.connections import get_store
from app.database.store import RecordStore
from app.dependencies.auth import get_current_identity
from app.models.user import User
from app.services.auth_service import AuthService


def require_admin() -> Callable:
    """
    Dependency factory for admin-only routes.

    The admin flag is read from the users collection on every request, so
    revoking access takes effect immediately for tokens already issued.

    Usage:
        @router.get("/admin-only")
        async def admin_route(admin: User = Depends(require_admin())):
            ...
    """
    async def admin_checker(
        email: str = Depends(get_current_identity),
        store: RecordStore = Depends(get_store),
    ) -> User:
        user = await AuthService(store).get_user_by_email(email)
        if user is None or not user.is_admin:
            raise UnauthorizedError("Admin access required")
        return user

    return admin_checker
