"""
User model for the users collection.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document stored in the users mapping, keyed by email.
    """
    name: str = Field(default="", description="Display name")
    email: str = Field(..., description="Unique email address, also the mapping key")
    phone: Optional[str] = Field(None, description="Contact phone number")
    password_hash: str = Field(..., alias="password", description="Bcrypt hashed password")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Admin console access")
    member_since: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="memberSince",
        description="Account creation timestamp",
    )

    class Config:
        populate_by_name = True
        extra = "ignore"

    def to_document(self) -> dict:
        """Serialize with the persisted key names."""
        return self.model_dump(by_alias=True, mode="json")
