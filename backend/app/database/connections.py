"""
Record store instance management.
"""
from typing import Optional

from app.config import get_settings
from app.database.store import JsonFileStore, RecordStore

# Global store instance
_store: Optional[RecordStore] = None


async def get_store() -> RecordStore:
    """Get or create the record store."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = JsonFileStore(settings.data_dir)
    return _store


async def close_store():
    """Drop the store instance."""
    global _store
    _store = None
