"""
Authentication service for signup, signin and profile lookup.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from starlette.concurrency import run_in_threadpool

from app.core.errors import ConflictError, InputValidationError, NotFoundError
from app.core.security import (
    create_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from app.database.collections import Collections
from app.models.user import User
from app.schemas.auth import (
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
    UserProfile,
)
from app.services.base import CollectionService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(CollectionService):
    """Service for authentication operations."""

    async def signup(self, request: SignupRequest) -> SignupResponse:
        """
        Register a new user.

        Args:
            request: Signup request with name, email, phone and password

        Returns:
            SignupResponse with the registered email

        Raises:
            ConflictError: If the email is already registered
        """
        # Hash outside the lock, bcrypt is the slow part
        hashed_password = await run_in_threadpool(hash_password, request.password)

        async with self.store.transaction(Collections.USERS):
            users = await self._load(Collections.USERS)
            if request.email in users:
                raise ConflictError("User already exists")

            user = User(
                name=request.name,
                email=request.email,
                phone=request.phone,
                password_hash=hashed_password,
                is_admin=False,
                member_since=datetime.now(timezone.utc),
            )
            users[user.email] = user.to_document()
            await self._save(Collections.USERS, users)

        logger.info(f"New account created: {user.email}")
        return SignupResponse(email=user.email)

    async def signin(self, request: SigninRequest) -> SigninResponse:
        """
        Authenticate user and return a bearer token.

        Unknown emails and wrong passwords raise the same error, and an unknown
        email still pays for one hash verification.

        Raises:
            InputValidationError: If credentials are invalid
        """
        user = await self.get_user_by_email(request.email)

        if user is None:
            await run_in_threadpool(dummy_verify)
            logger.info(f"Failed signin for unknown account {request.email}")
            raise InputValidationError(INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, request.password, user.password_hash):
            logger.info(f"Failed signin for {user.email}")
            raise InputValidationError(INVALID_CREDENTIALS)

        return SigninResponse(
            token=create_access_token(user.email),
            user=UserProfile.from_user(user),
        )

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address (exact, case-sensitive match)

        Returns:
            User model or None if not found
        """
        users = await self._load(Collections.USERS)
        user_doc = users.get(email)
        if not isinstance(user_doc, dict):
            return None
        return User.model_validate({**user_doc, "email": email})

    async def get_profile(self, email: str) -> UserProfile:
        """
        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.get_user_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        return UserProfile.from_user(user)
