"""
Authentication request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from app.models.user import User


def check_email_format(value: Optional[str]) -> Optional[str]:
    """
    Reject malformed addresses but return the submitted string unchanged.

    Emails are stored and matched exactly as typed, so the normalized form
    produced by the validator is discarded.
    """
    if value is not None:
        validate_email(value)
    return value


class SignupRequest(BaseModel):
    """Signup request body."""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: str = Field(..., description="User email address (must be unique, case-sensitive)")
    phone: Optional[str] = Field(None, max_length=30, description="Contact phone number")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        return check_email_format(value)


class SignupResponse(BaseModel):
    """Signup response."""
    message: str = Field(
        default="Account created successfully",
        description="Success message"
    )
    email: str = Field(..., description="Registered email")


class SigninRequest(BaseModel):
    """
    Signin request body.

    Deliberately unconstrained beyond presence so that malformed and unknown
    credentials fail the same way.
    """
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class UserProfile(BaseModel):
    """User information returned to clients (never includes the password hash)."""
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email")
    phone: Optional[str] = Field(None, description="Contact phone number")
    is_admin: bool = Field(..., alias="isAdmin", description="Admin console access")
    member_since: Optional[datetime] = Field(None, alias="memberSince", description="Account creation timestamp")

    class Config:
        populate_by_name = True

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            name=user.name,
            email=user.email,
            phone=user.phone,
            is_admin=user.is_admin,
            member_since=user.member_since,
        )


class SigninResponse(BaseModel):
    """Signin response with bearer token."""
    token: str = Field(..., description="JWT access token")
    user: UserProfile = Field(..., description="Signed-in user")
