"""
Admin console request/response schemas.
"""
from pydantic import BaseModel, Field


class AdminChangeRequest(BaseModel):
    """Grant or revoke admin access for a user."""
    email: str = Field(..., min_length=1, description="Target user email")


class StatusResponse(BaseModel):
    """Plain confirmation message."""
    message: str = Field(..., description="Result message")


class StatsResponse(BaseModel):
    """Dashboard counters for the admin console."""
    total_members: int = Field(..., alias="totalMembers", description="Registered users")
    total_events: int = Field(..., alias="totalEvents", description="Listed events")
    total_photos: int = Field(..., alias="totalPhotos", description="Gallery items")
    unread_messages: int = Field(..., alias="unreadMessages", description="Messages not yet read")

    class Config:
        populate_by_name = True
