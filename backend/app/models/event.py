"""
Event model for the events collection.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Event(BaseModel):
    """Community event listing."""
    id: int = Field(..., description="Event ID (max existing + 1)")
    name: str = Field(..., description="Event name")
    date: str = Field(..., description="Event date, e.g. 2026-01-14")
    time: str = Field(default="", description="Start time, e.g. 09:00")
    location: str = Field(default="", description="Venue")
    description: str = Field(default="", description="Event description")
    icon: str = Field(default="", description="Display icon")
    registrations: int = Field(
        default=0,
        description="Number of registered members, always the size of the registration list",
    )
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")

    class Config:
        populate_by_name = True
        extra = "ignore"

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
