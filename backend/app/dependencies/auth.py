"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import InvalidTokenError, UnauthenticatedError
from app.core.security import verify_access_token

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="JWT obtained from POST /api/auth/signin",
)


async def get_current_identity(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> str:
    """
    Dependency returning the email carried by the request's bearer token.

    Token is passed as a header: ``Authorization: Bearer <token>``

    Raises:
        UnauthenticatedError (401): If no token was sent
        InvalidTokenError (403): If the token is malformed, forged or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Access token required")

    email = verify_access_token(credentials.credentials)
    if email is None:
        raise InvalidTokenError("Invalid token")

    request.state.user_email = email
    return email


# Type alias for cleaner route signatures
CurrentIdentity = Annotated[str, Depends(get_current_identity)]
