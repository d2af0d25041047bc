"""
Gallery request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.gallery import MediaType


class GalleryUpload(BaseModel):
    """Upload request carrying a base64 encoded photo or video."""
    title: str = Field(..., min_length=1, max_length=200, description="Item title")
    description: str = Field(..., min_length=1, max_length=2000, description="Item description")
    category: str = Field(..., min_length=1, max_length=100, description="Gallery category")
    file_data: str = Field(..., alias="fileData", min_length=1, description="Base64 encoded payload")
    file_type: Optional[MediaType] = Field(None, alias="fileType", description="image or video")
    mime_type: Optional[str] = Field(None, alias="mimeType", description="Payload MIME type")

    class Config:
        populate_by_name = True
