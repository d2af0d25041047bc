"""
Gallery service for photo and video items.
"""
import logging
from datetime import datetime, timezone

from app.config import get_settings
from app.core.errors import InputValidationError, NotFoundError
from app.database.collections import Collections
from app.models.gallery import GalleryItem, MediaType
from app.schemas.gallery import GalleryUpload
from app.services.base import CollectionService, next_id

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    "image/jpeg": MediaType.IMAGE,
    "image/jpg": MediaType.IMAGE,
    "image/png": MediaType.IMAGE,
    "image/gif": MediaType.IMAGE,
    "video/mp4": MediaType.VIDEO,
    "video/quicktime": MediaType.VIDEO,
    "video/x-msvideo": MediaType.VIDEO,
    "video/avi": MediaType.VIDEO,
    "video/webm": MediaType.VIDEO,
}


def payload_size(file_data: str) -> int:
    """Approximate decoded size in bytes of a base64 payload (data URLs allowed)."""
    _, _, encoded = file_data.rpartition(",")
    encoded = encoded.strip()
    return len(encoded) * 3 // 4 - encoded[-2:].count("=")


class GalleryService(CollectionService):
    """Service for gallery uploads and removal."""

    async def _load_items(self) -> list[GalleryItem]:
        return [GalleryItem.model_validate(doc) for doc in await self._load(Collections.GALLERY)]

    async def list_items(self) -> list[GalleryItem]:
        return await self._load_items()

    def _validate_upload(self, request: GalleryUpload) -> MediaType | None:
        if request.mime_type is not None:
            media_type = ALLOWED_MIME_TYPES.get(request.mime_type.lower())
            if media_type is None:
                raise InputValidationError("Only image and video files are allowed!")
        else:
            media_type = None

        max_bytes = get_settings().max_upload_mb * 1024 * 1024
        if payload_size(request.file_data) > max_bytes:
            raise InputValidationError("File too large")

        return request.file_type or media_type

    async def upload(self, request: GalleryUpload, uploaded_by: str) -> GalleryItem:
        """
        Store a new gallery item with its payload embedded.

        Raises:
            InputValidationError: For disallowed MIME types or oversized payloads
        """
        media_type = self._validate_upload(request)

        async with self.store.transaction(Collections.GALLERY):
            items = await self._load_items()
            item = GalleryItem(
                id=next_id(items),
                title=request.title,
                description=request.description,
                category=request.category,
                media_type=media_type,
                mime_type=request.mime_type,
                data=request.file_data,
                uploaded_by=uploaded_by,
                uploaded_at=datetime.now(timezone.utc),
            )
            items.append(item)
            await self._save(Collections.GALLERY, [i.to_document() for i in items])

        logger.info(f"{uploaded_by} uploaded gallery item {item.id}: {item.title}")
        return item

    async def delete_item(self, item_id: int) -> None:
        async with self.store.transaction(Collections.GALLERY):
            items = await self._load_items()
            remaining = [item for item in items if item.id != item_id]
            if len(remaining) == len(items):
                raise NotFoundError("Item not found")
            await self._save(Collections.GALLERY, [i.to_document() for i in remaining])

        logger.info(f"Deleted gallery item {item_id}")
