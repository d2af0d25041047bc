"""
Contact message service, including the public FAQ board.
"""
import logging
from datetime import datetime, timezone

from pydantic import ValidationError

from app.config import get_settings
from app.core.errors import NotFoundError
from app.database.collections import Collections
from app.models.message import Message
from app.schemas.message import ContactRequest, FAQEntry
from app.services.base import CollectionService, next_id

logger = logging.getLogger(__name__)


class MessageService(CollectionService):
    """Service for contact messages and FAQ likes."""

    async def _load_messages(self) -> list[Message]:
        return [Message.model_validate(doc) for doc in await self._load(Collections.MESSAGES)]

    async def _save_messages(self, messages: list[Message]) -> None:
        await self._save(Collections.MESSAGES, [m.to_document() for m in messages])

    @staticmethod
    def _find(messages: list[Message], message_id: int) -> Message:
        for message in messages:
            if message.id == message_id:
                return message
        raise NotFoundError("Message not found")

    async def submit(self, request: ContactRequest) -> Message:
        """Store a contact form submission as an unread message with no likes."""
        async with self.store.transaction(Collections.MESSAGES):
            messages = await self._load_messages()
            message = Message(
                id=next_id(messages),
                **request.model_dump(),
                date=datetime.now(timezone.utc),
                read=False,
                likes=0,
            )
            messages.append(message)
            await self._save_messages(messages)

        logger.info(f"New contact message {message.id} from {message.name}")
        return message

    async def list_messages(self) -> list[Message]:
        return await self._load_messages()

    async def mark_read(self, message_id: int) -> Message:
        async with self.store.transaction(Collections.MESSAGES):
            messages = await self._load_messages()
            message = self._find(messages, message_id)
            message.read = True
            await self._save_messages(messages)
        return message

    async def delete_message(self, message_id: int) -> None:
        async with self.store.transaction(Collections.MESSAGES):
            messages = await self._load_messages()
            messages.remove(self._find(messages, message_id))
            await self._save_messages(messages)

        logger.info(f"Deleted message {message_id}")

    async def count_unread(self) -> int:
        """Count unread messages, skipping entries that are not valid message records."""
        unread = 0
        for doc in await self._load(Collections.MESSAGES):
            try:
                message = Message.model_validate(doc)
            except ValidationError:
                logger.warning(f"Skipping malformed entry in {Collections.MESSAGES}")
                continue
            if not message.read:
                unread += 1
        return unread

    async def top_faqs(self, limit: int | None = None) -> list[FAQEntry]:
        """
        Most liked messages, projected to their public fields.

        ``sorted`` is stable, so equally liked messages keep collection order.
        """
        limit = limit if limit is not None else get_settings().faq_limit
        messages = await self._load_messages()
        ranked = sorted(messages, key=lambda m: m.likes, reverse=True)[:limit]
        return [
            FAQEntry(
                id=m.id,
                name=m.name,
                subject=m.subject,
                message=m.message,
                date=m.date,
                likes=m.likes,
            )
            for m in ranked
        ]

    async def like(self, message_id: int) -> int:
        """Add one like. Repeated likes from the same visitor all count."""
        async with self.store.transaction(Collections.MESSAGES):
            messages = await self._load_messages()
            message = self._find(messages, message_id)
            message.likes += 1
            await self._save_messages(messages)
        return message.likes
