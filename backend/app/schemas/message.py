"""
Contact message and FAQ schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.auth import check_email_format


class ContactRequest(BaseModel):
    """Contact form submission."""
    name: str = Field(..., min_length=1, max_length=100, description="Sender name")
    email: Optional[str] = Field(None, description="Sender email")
    phone: Optional[str] = Field(None, max_length=30, description="Sender phone")
    subject: str = Field(default="", max_length=200, description="Message subject")
    message: str = Field(..., min_length=1, max_length=5000, description="Message body")

    @field_validator("email")
    @classmethod
    def email_format(cls, value: Optional[str]) -> Optional[str]:
        return check_email_format(value)


class FAQEntry(BaseModel):
    """Public view of a message on the FAQ board."""
    id: int = Field(..., description="Message ID")
    name: str = Field(..., description="Sender name")
    subject: str = Field(..., description="Message subject")
    message: str = Field(..., description="Message body")
    date: datetime = Field(..., description="Submission timestamp")
    likes: int = Field(..., description="Like count")


class LikeResponse(BaseModel):
    likes: int = Field(..., description="Like count after the increment")
