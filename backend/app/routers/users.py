"""
Admin console router for member management.
"""
from fastapi import APIRouter, Depends

from app.database.connections import get_store
from app.dependencies.roles import require_admin
from app.schemas.auth import UserProfile
from app.schemas.user import AdminChangeRequest, StatusResponse
from app.services.user_service import UserService

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    dependencies=[Depends(require_admin())],
)


async def get_user_service() -> UserService:
    """Dependency to get UserService instance."""
    store = await get_store()
    return UserService(store)


@router.get(
    "",
    response_model=list[UserProfile],
    summary="List members",
)
async def list_users(
    user_service: UserService = Depends(get_user_service),
):
    """List all members without password hashes. Admin only."""
    return await user_service.list_users()


@router.post(
    "/grant-admin",
    response_model=StatusResponse,
    summary="Grant admin access",
)
async def grant_admin(
    body: AdminChangeRequest,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.grant_admin(body.email)
    return StatusResponse(message="Admin access granted")


@router.post(
    "/revoke-admin",
    response_model=StatusResponse,
    summary="Revoke admin access",
)
async def revoke_admin(
    body: AdminChangeRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Revoke admin access. The primary admin can never be demoted."""
    await user_service.revoke_admin(body.email)
    return StatusResponse(message="Admin access revoked")


@router.delete(
    "/{email}",
    response_model=StatusResponse,
    summary="Delete member",
)
async def delete_user(
    email: str,
    user_service: UserService = Depends(get_user_service),
):
    """Delete a member account. The primary admin can never be deleted."""
    await user_service.delete_user(email)
    return StatusResponse(message="User deleted")
