"""
Event request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.event import Event


class EventCreate(BaseModel):
    """Create event request. Only these fields are ever stored from a request."""
    name: str = Field(..., min_length=1, max_length=200, description="Event name")
    date: str = Field(..., min_length=1, max_length=50, description="Event date")
    time: str = Field(default="", max_length=50, description="Start time")
    location: str = Field(default="", max_length=200, description="Venue")
    description: str = Field(default="", max_length=5000, description="Event description")
    icon: str = Field(default="", max_length=20, description="Display icon")


class EventUpdate(BaseModel):
    """Update event request; omitted fields keep their stored value."""
    name: Optional[str] = Field(None, min_length=1, max_length=200, description="Event name")
    date: Optional[str] = Field(None, min_length=1, max_length=50, description="Event date")
    time: Optional[str] = Field(None, max_length=50, description="Start time")
    location: Optional[str] = Field(None, max_length=200, description="Venue")
    description: Optional[str] = Field(None, max_length=5000, description="Event description")
    icon: Optional[str] = Field(None, max_length=20, description="Display icon")


class RegistrationResponse(BaseModel):
    """Result of registering for an event."""
    message: str = Field(
        default="Successfully registered for event",
        description="Success message",
    )
    event: Event = Field(..., description="Event with updated registration count")


class EventRegistrations(BaseModel):
    """Registrants of one event, in registration order."""
    event_id: int = Field(..., alias="eventId", description="Event ID")
    emails: list[str] = Field(default=[], description="Registered member emails")

    class Config:
        populate_by_name = True
