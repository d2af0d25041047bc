"""
Pydantic models for stored collection records.
"""
from app.models.user import User
from app.models.event import Event
from app.models.gallery import GalleryItem, MediaType
from app.models.message import Message

__all__ = [
    "User",
    "Event",
    "GalleryItem",
    "MediaType",
    "Message",
]
