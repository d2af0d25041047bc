"""
Shared read-modify-write helpers for collection services.
"""
import logging
from typing import Any, Iterable

from app.core.errors import StorageError
from app.database.collections import COLLECTION_SHAPES, empty_document
from app.database.store import RecordStore

logger = logging.getLogger(__name__)


def next_id(records: Iterable[Any]) -> int:
    """
    Id for a new record: highest existing id + 1, or 1 for an empty collection.

    Ids are not a persisted counter, so deleting the current maximum frees its
    id for the next record.
    """
    return max((record.id for record in records), default=0) + 1


class CollectionService:
    """Base class for services that read and rewrite whole collections."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def _load(self, collection: str) -> dict | list:
        """Load a collection, treating a missing or malformed document as empty."""
        document = await self.store.load(collection)
        if document is None:
            return empty_document(collection)
        if not isinstance(document, COLLECTION_SHAPES[collection]):
            logger.warning(f"Ignoring {collection} document of unexpected type {type(document).__name__}")
            return empty_document(collection)
        return document

    async def _save(self, collection: str, document: dict | list) -> None:
        if not await self.store.save(collection, document):
            raise StorageError(f"Could not save {collection}")
