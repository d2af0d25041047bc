"""
Contact message model for the messages collection.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A contact-form submission; liked messages double as FAQ entries."""
    id: int = Field(..., description="Message ID (max existing + 1)")
    name: str = Field(..., description="Sender name")
    email: Optional[str] = Field(None, description="Sender email")
    phone: Optional[str] = Field(None, description="Sender phone")
    subject: str = Field(default="", description="Message subject")
    message: str = Field(..., description="Message body")
    date: datetime = Field(..., description="Submission timestamp")
    read: bool = Field(default=False, description="Marked read by an admin")
    likes: int = Field(default=0, description="Public like counter")

    class Config:
        extra = "ignore"

    def to_document(self) -> dict:
        return self.model_dump(mode="json")
