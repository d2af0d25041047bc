"""
Contact router: public submissions and the admin inbox.
"""
from fastapi import APIRouter, Depends, status

from app.database.connections import get_store
from app.dependencies.roles import require_admin
from app.models.message import Message
from app.schemas.message import ContactRequest
from app.schemas.user import StatusResponse
from app.services.message_service import MessageService

router = APIRouter(prefix="/api/contact", tags=["Contact"])


async def get_message_service() -> MessageService:
    """Dependency to get MessageService instance."""
    store = await get_store()
    return MessageService(store)


@router.post(
    "",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
)
async def send_message(
    body: ContactRequest,
    message_service: MessageService = Depends(get_message_service),
):
    """Submit the contact form. Public."""
    await message_service.submit(body)
    return StatusResponse(message="Message sent successfully")


@router.get(
    "",
    response_model=list[Message],
    dependencies=[Depends(require_admin())],
    summary="List messages",
)
async def list_messages(
    message_service: MessageService = Depends(get_message_service),
):
    """List every message including read state. Admin only."""
    return await message_service.list_messages()


@router.put(
    "/{message_id}/read",
    response_model=Message,
    dependencies=[Depends(require_admin())],
    summary="Mark message read",
)
async def mark_read(
    message_id: int,
    message_service: MessageService = Depends(get_message_service),
):
    """Mark a message as read. Admin only."""
    return await message_service.mark_read(message_id)


@router.delete(
    "/{message_id}",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin())],
    summary="Delete message",
)
async def delete_message(
    message_id: int,
    message_service: MessageService = Depends(get_message_service),
):
    """Delete a message. Admin only."""
    await message_service.delete_message(message_id)
    return StatusResponse(message="Message deleted")
