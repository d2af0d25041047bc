"""
Database module - JSON record store, collection definitions and bootstrap.
"""
from app.database.collections import Collections, COLLECTION_SHAPES, empty_document
from app.database.connections import get_store, close_store
from app.database.store import JsonFileStore, MemoryStore, RecordStore

__all__ = [
    "Collections",
    "COLLECTION_SHAPES",
    "empty_document",
    "get_store",
    "close_store",
    "JsonFileStore",
    "MemoryStore",
    "RecordStore",
]
