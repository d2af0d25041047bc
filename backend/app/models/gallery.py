"""
Gallery item model for the gallery collection.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    """Kind of media held by a gallery item."""
    IMAGE = "image"
    VIDEO = "video"


class GalleryItem(BaseModel):
    """
    Photo or video in the gallery.

    The media payload is embedded as base64 in ``data``.
    """
    id: int = Field(..., description="Item ID (max existing + 1)")
    title: str = Field(..., description="Item title")
    description: str = Field(..., description="Item description")
    category: str = Field(..., description="Gallery category")
    media_type: Optional[MediaType] = Field(None, alias="type", description="image or video")
    mime_type: Optional[str] = Field(None, alias="mimeType", description="Payload MIME type")
    data: str = Field(..., description="Base64 encoded media payload")
    uploaded_by: str = Field(..., alias="uploadedBy", description="Uploader email")
    uploaded_at: datetime = Field(..., alias="uploadedAt", description="Upload timestamp")

    class Config:
        populate_by_name = True
        use_enum_values = True
        extra = "ignore"

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
