"""
Events router for listings, admin management and member registration.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.connections import get_store
from app.dependencies.auth import CurrentIdentity
from app.dependencies.roles import require_admin
from app.models.event import Event
from app.models.user import User
from app.schemas.event import (
    EventCreate,
    EventRegistrations,
    EventUpdate,
    RegistrationResponse,
)
from app.schemas.user import StatusResponse
from app.services.event_service import EventService

router = APIRouter(prefix="/api/events", tags=["Events"])

AdminUser = Annotated[User, Depends(require_admin())]


async def get_event_service() -> EventService:
    """Dependency to get EventService instance."""
    store = await get_store()
    return EventService(store)


@router.get(
    "",
    response_model=list[Event],
    summary="List events",
)
async def list_events(
    event_service: EventService = Depends(get_event_service),
):
    """List all events. Public."""
    return await event_service.list_events()


@router.post(
    "",
    response_model=Event,
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
)
async def create_event(
    body: EventCreate,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    """
    Create a new event. Admin only.

    - **name**, **date**: required
    - **time**, **location**, **description**, **icon**: optional
    """
    return await event_service.create_event(body)


@router.put(
    "/{event_id}",
    response_model=Event,
    summary="Update event",
)
async def update_event(
    event_id: int,
    body: EventUpdate,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    """Update event details. Admin only."""
    return await event_service.update_event(event_id, body)


@router.delete(
    "/{event_id}",
    response_model=StatusResponse,
    summary="Delete event",
)
async def delete_event(
    event_id: int,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    """
    Delete an event and its registrations. Admin only.

    **Warning**: This action cannot be undone.
    """
    await event_service.delete_event(event_id)
    return StatusResponse(message="Event deleted")


@router.post(
    "/{event_id}/register",
    response_model=RegistrationResponse,
    summary="Register for event",
)
async def register_for_event(
    event_id: int,
    email: CurrentIdentity,
    event_service: EventService = Depends(get_event_service),
):
    """
    Register the signed-in member for an event.

    Returns 400 if the member is already registered.
    """
    event = await event_service.register(event_id, email)
    return RegistrationResponse(event=event)


@router.get(
    "/{event_id}/registrations",
    response_model=EventRegistrations,
    summary="List event registrants",
)
async def list_registrations(
    event_id: int,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    """List registered member emails in registration order. Admin only."""
    return await event_service.get_registrations(event_id)
