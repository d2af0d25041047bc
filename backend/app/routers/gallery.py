"""
Gallery router for photos and videos.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.connections import get_store
from app.dependencies.roles import require_admin
from app.models.gallery import GalleryItem
from app.models.user import User
from app.schemas.gallery import GalleryUpload
from app.schemas.user import StatusResponse
from app.services.gallery_service import GalleryService

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


async def get_gallery_service() -> GalleryService:
    """Dependency to get GalleryService instance."""
    store = await get_store()
    return GalleryService(store)


@router.get(
    "",
    response_model=list[GalleryItem],
    summary="List gallery items",
)
async def list_gallery(
    gallery_service: GalleryService = Depends(get_gallery_service),
):
    """List all gallery items with their embedded payloads. Public."""
    return await gallery_service.list_items()


@router.post(
    "/upload",
    response_model=GalleryItem,
    status_code=status.HTTP_201_CREATED,
    summary="Upload photo or video",
)
async def upload_item(
    body: GalleryUpload,
    admin: Annotated[User, Depends(require_admin())],
    gallery_service: GalleryService = Depends(get_gallery_service),
):
    """
    Upload a base64 encoded photo or video. Admin only.

    - **title**, **description**, **category**, **fileData**: required
    - **fileType**: image or video
    - **mimeType**: one of the allowed image/video MIME types
    """
    return await gallery_service.upload(body, uploaded_by=admin.email)


@router.delete(
    "/{item_id}",
    response_model=StatusResponse,
    summary="Delete gallery item",
)
async def delete_item(
    item_id: int,
    admin: Annotated[User, Depends(require_admin())],
    gallery_service: GalleryService = Depends(get_gallery_service),
):
    """Delete a gallery item. Admin only."""
    await gallery_service.delete_item(item_id)
    return StatusResponse(message="Item deleted")
