"""
Admin console user management.
"""
import logging

from app.config import get_settings
from app.core.errors import NotFoundError, UnauthorizedError
from app.database.collections import Collections
from app.models.user import User
from app.schemas.auth import UserProfile
from app.services.base import CollectionService

logger = logging.getLogger(__name__)


class UserService(CollectionService):
    """Service for listing users and changing admin access."""

    def _check_not_protected(self, email: str, message: str) -> None:
        # The bootstrap admin guarantees at least one admin always exists
        if email == get_settings().bootstrap_admin_email:
            raise UnauthorizedError(message)

    async def list_users(self) -> list[UserProfile]:
        users = await self._load(Collections.USERS)
        return [
            UserProfile.from_user(User.model_validate({**doc, "email": email}))
            for email, doc in users.items()
        ]

    async def set_admin(self, email: str, is_admin: bool) -> None:
        """
        Grant or revoke admin access.

        Raises:
            UnauthorizedError: When revoking the bootstrap admin
            NotFoundError: If the user does not exist
        """
        if not is_admin:
            self._check_not_protected(email, "Cannot revoke primary admin access")

        async with self.store.transaction(Collections.USERS):
            users = await self._load(Collections.USERS)
            if email not in users:
                raise NotFoundError("User not found")
            users[email]["isAdmin"] = is_admin
            await self._save(Collections.USERS, users)

        logger.info(f"Admin access {'granted to' if is_admin else 'revoked from'} {email}")

    async def grant_admin(self, email: str) -> None:
        await self.set_admin(email, True)

    async def revoke_admin(self, email: str) -> None:
        await self.set_admin(email, False)

    async def delete_user(self, email: str) -> None:
        """
        Raises:
            UnauthorizedError: When deleting the bootstrap admin
            NotFoundError: If the user does not exist
        """
        self._check_not_protected(email, "Cannot delete primary admin")

        async with self.store.transaction(Collections.USERS):
            users = await self._load(Collections.USERS)
            if email not in users:
                raise NotFoundError("User not found")
            del users[email]
            await self._save(Collections.USERS, users)

        logger.info(f"Deleted user {email}")
