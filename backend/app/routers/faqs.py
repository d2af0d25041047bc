"""
Public FAQ board built from the most liked contact messages.
"""
from fastapi import APIRouter, Depends

from app.routers.contact import get_message_service
from app.schemas.message import FAQEntry, LikeResponse
from app.services.message_service import MessageService

router = APIRouter(prefix="/api/faqs", tags=["FAQ"])


@router.get(
    "",
    response_model=list[FAQEntry],
    summary="Top liked questions",
)
async def list_faqs(
    message_service: MessageService = Depends(get_message_service),
):
    """Top 20 messages by likes, most liked first. Public."""
    return await message_service.top_faqs()


@router.post(
    "/{message_id}/like",
    response_model=LikeResponse,
    summary="Like a question",
)
async def like_faq(
    message_id: int,
    message_service: MessageService = Depends(get_message_service),
):
    """Add one like to a question. Public; every call counts."""
    return LikeResponse(likes=await message_service.like(message_id))
