"""
Record store: whole-document load/save of named JSON collections.

Every operation reads the full collection, mutates it and writes the full
collection back. ``transaction()`` serializes those cycles per collection
inside one process; across processes the last writer still wins.
"""
import asyncio
import copy
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class RecordStore:
    """Base class for collection stores."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}

    async def load(self, collection: str) -> Optional[Any]:
        """
        Load a collection document.

        Returns:
            The deserialized document, or None if it is missing or unreadable
        """
        raise NotImplementedError

    async def save(self, collection: str, document: Any) -> bool:
        """
        Replace a collection document in full.

        Returns:
            True on success, False if the document could not be written
        """
        raise NotImplementedError

    async def exists(self, collection: str) -> bool:
        raise NotImplementedError

    def _lock_for(self, collection: str) -> asyncio.Lock:
        lock = self._locks.get(collection)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[collection] = lock
        return lock

    @asynccontextmanager
    async def transaction(self, *collections: str) -> AsyncIterator[None]:
        """
        Hold the write locks of one or more collections.

        Locks are taken in sorted name order so overlapping multi-collection
        transactions cannot deadlock.
        """
        locks = [self._lock_for(name) for name in sorted(set(collections))]
        acquired: list[asyncio.Lock] = []
        try:
            for lock in locks:
                await lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()


class JsonFileStore(RecordStore):
    """Stores each collection as ``<data_dir>/<collection>.json``."""

    def __init__(self, data_dir: str | Path):
        super().__init__()
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _read(self, collection: str) -> Optional[Any]:
        path = self.path_for(collection)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

    def _write(self, collection: str, document: Any) -> bool:
        path = self.path_for(collection)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{collection}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing {path}: {e}")
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False

    async def load(self, collection: str) -> Optional[Any]:
        return await run_in_threadpool(self._read, collection)

    async def save(self, collection: str, document: Any) -> bool:
        return await run_in_threadpool(self._write, collection, document)

    async def exists(self, collection: str) -> bool:
        return self.path_for(collection).exists()


class MemoryStore(RecordStore):
    """In-memory store; documents are copied on the way in and out."""

    def __init__(self, documents: Optional[dict[str, Any]] = None):
        super().__init__()
        self._documents: dict[str, Any] = copy.deepcopy(documents or {})

    async def load(self, collection: str) -> Optional[Any]:
        if collection not in self._documents:
            return None
        return copy.deepcopy(self._documents[collection])

    async def save(self, collection: str, document: Any) -> bool:
        # Round-trip through JSON so unserializable documents fail like on disk
        try:
            self._documents[collection] = json.loads(json.dumps(document))
        except (TypeError, ValueError) as e:
            logger.error(f"Error writing {collection}: {e}")
            return False
        return True

    async def exists(self, collection: str) -> bool:
        return collection in self._documents
