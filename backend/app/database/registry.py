"""
Collection bootstrap.
Ensures every collection document exists on startup without touching existing data.
"""
import logging
from datetime import datetime, timezone

from starlette.concurrency import run_in_threadpool

from app.config import Settings, get_settings
from app.core.errors import StorageError
from app.core.security import hash_password
from app.database.collections import ALL_COLLECTIONS, Collections, empty_document
from app.database.store import RecordStore
from app.models.event import Event
from app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_EVENTS = [
    Event(
        id=1,
        name="Sankranti Festival 2026",
        date="2026-01-14",
        time="09:00",
        location="Community Hall, Klang",
        description="Grand celebration of the harvest festival",
        icon="🪔",
        registrations=0,
    ),
]


async def _initial_document(collection: str, settings: Settings) -> dict | list:
    if collection == Collections.USERS:
        admin = User(
            name=settings.bootstrap_admin_name,
            email=settings.bootstrap_admin_email,
            phone=settings.bootstrap_admin_phone,
            password_hash=await run_in_threadpool(
                hash_password, settings.bootstrap_admin_password
            ),
            is_admin=True,
            member_since=datetime.now(timezone.utc),
        )
        return {admin.email: admin.to_document()}
    if collection == Collections.EVENTS:
        return [event.to_document() for event in DEFAULT_EVENTS]
    return empty_document(collection)


async def seed_collections(store: RecordStore, settings: Settings | None = None) -> list[str]:
    """
    Write the initial document of every collection that does not exist yet.

    Existing documents are never modified, so this is safe to run on every start.

    Returns:
        Names of the collections that were seeded
    """
    settings = settings or get_settings()
    seeded = []

    for collection in ALL_COLLECTIONS:
        async with store.transaction(collection):
            if await store.exists(collection):
                continue
            document = await _initial_document(collection, settings)
            if not await store.save(collection, document):
                raise StorageError(f"Could not seed {collection}")
            seeded.append(collection)

    if Collections.USERS in seeded:
        logger.info(f"Seeded bootstrap admin {settings.bootstrap_admin_email}")
    if seeded:
        logger.info(f"Seeded collections: {', '.join(seeded)}")
    return seeded
