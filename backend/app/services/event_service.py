"""
Event service for event listings and member registration.
"""
import logging
from datetime import datetime, timezone

from app.core.errors import ConflictError, NotFoundError
from app.database.collections import Collections
from app.models.event import Event
from app.schemas.event import EventCreate, EventRegistrations, EventUpdate
from app.services.base import CollectionService, next_id

logger = logging.getLogger(__name__)


class EventService(CollectionService):
    """Service for event CRUD and registrations."""

    async def _load_events(self) -> list[Event]:
        return [Event.model_validate(doc) for doc in await self._load(Collections.EVENTS)]

    async def _save_events(self, events: list[Event]) -> None:
        await self._save(Collections.EVENTS, [event.to_document() for event in events])

    @staticmethod
    def _index(events: list[Event], event_id: int) -> int:
        for index, event in enumerate(events):
            if event.id == event_id:
                return index
        raise NotFoundError("Event not found")

    # ==================== Event CRUD ====================

    async def list_events(self) -> list[Event]:
        return await self._load_events()

    async def create_event(self, request: EventCreate) -> Event:
        """Create an event with the next free id and no registrations."""
        async with self.store.transaction(Collections.EVENTS):
            events = await self._load_events()
            event = Event(
                id=next_id(events),
                **request.model_dump(),
                registrations=0,
                created_at=datetime.now(timezone.utc),
            )
            events.append(event)
            await self._save_events(events)

        logger.info(f"Created event {event.id}: {event.name}")
        return event

    async def update_event(self, event_id: int, request: EventUpdate) -> Event:
        """Apply the fields present in the request; id and counters never change."""
        update_data = request.model_dump(exclude_unset=True, exclude_none=True)

        async with self.store.transaction(Collections.EVENTS):
            events = await self._load_events()
            index = self._index(events, event_id)
            if not update_data:
                return events[index]

            updated = events[index].model_copy(update=update_data)
            events[index] = updated
            await self._save_events(events)

        return updated

    async def delete_event(self, event_id: int) -> None:
        """Delete an event along with its registration list."""
        async with self.store.transaction(Collections.EVENTS, Collections.REGISTRATIONS):
            events = await self._load_events()
            del events[self._index(events, event_id)]

            registrations = await self._load(Collections.REGISTRATIONS)
            if registrations.pop(str(event_id), None) is not None:
                await self._save(Collections.REGISTRATIONS, registrations)
            await self._save_events(events)

        logger.info(f"Deleted event {event_id}")

    # ==================== Registrations ====================

    async def register(self, event_id: int, email: str) -> Event:
        """
        Register a member for an event.

        The event's ``registrations`` count is recomputed from the registration
        list every time, never incremented on its own.

        Raises:
            NotFoundError: If the event does not exist
            ConflictError: If the member is already registered
        """
        async with self.store.transaction(Collections.EVENTS, Collections.REGISTRATIONS):
            events = await self._load_events()
            event = events[self._index(events, event_id)]

            registrations = await self._load(Collections.REGISTRATIONS)
            emails = registrations.setdefault(str(event_id), [])
            if email in emails:
                raise ConflictError("Already registered for this event")

            emails.append(email)
            event.registrations = len(emails)

            await self._save(Collections.REGISTRATIONS, registrations)
            await self._save_events(events)

        logger.info(f"{email} registered for event {event_id}")
        return event

    async def get_registrations(self, event_id: int) -> EventRegistrations:
        events = await self._load_events()
        self._index(events, event_id)
        registrations = await self._load(Collections.REGISTRATIONS)
        return EventRegistrations(
            event_id=event_id,
            emails=list(registrations.get(str(event_id), [])),
        )
