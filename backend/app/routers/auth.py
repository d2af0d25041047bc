"""
Authentication router for signup, signin and the current profile.
"""
from fastapi import APIRouter, Depends, status

from app.database.connections import get_store
from app.dependencies.auth import CurrentIdentity
from app.schemas.auth import (
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
    UserProfile,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    store = await get_store()
    return AuthService(store)


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a member account",
)
async def signup(
    body: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new member account.

    - **name**: Display name
    - **email**: Valid email address, stored exactly as submitted (must be unique)
    - **phone**: Optional phone number
    - **password**: Password (any non-empty string)
    """
    return await auth_service.signup(body)


@router.post(
    "/signin",
    response_model=SigninResponse,
    summary="Sign in and get access token",
)
async def signin(
    body: SigninRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT valid for 7 days.

    Send the token as `Authorization: Bearer <token>` to protected endpoints.
    Unknown emails and wrong passwords both return 400 "Invalid credentials".
    """
    return await auth_service.signin(body)


@router.get(
    "/me",
    response_model=UserProfile,
    summary="Get current user info",
)
async def get_current_user_info(
    email: CurrentIdentity,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Get the stored profile of the signed-in member (without the password hash).
    """
    return await auth_service.get_profile(email)
