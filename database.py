"""
Keyed record store for the Portfolio CMS.

Every resource is one JSON string stored under one key. Stores are
synchronous, have a capacity limit and tell every *other* attached browsing
context when a key changes; the writing context notifies itself.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from pymongo import MongoClient

from config import CONTENT_STORE_PATH, DATABASE_NAME, DATABASE_URL, STORE_QUOTA_BYTES
from errors import QuotaExceededError
from events import ChangeSignal, StoreChanged

logger = logging.getLogger(__name__)

db = None
if DATABASE_URL:
    db = MongoClient(DATABASE_URL)[DATABASE_NAME]


class KeyedRecordStore:
    """Synchronous key -> string store with a size quota."""

    def __init__(self, quota: int = STORE_QUOTA_BYTES):
        self.quota = quota
        self._contexts: List[ChangeSignal] = []
        # API routes run in a threadpool; writes are serialized per store
        self._lock = threading.RLock()

    # Backend hooks
    def _load(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _save(self, key: str, value: str) -> None:
        raise NotImplementedError

    def _delete(self, key: str) -> None:
        raise NotImplementedError

    def items(self) -> Iterator[Tuple[str, str]]:
        raise NotImplementedError

    # Public API
    def get(self, key: str) -> Optional[str]:
        return self._load(key)

    def set(self, key: str, value: str, source: Optional[ChangeSignal] = None) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Store values must be strings, got {type(value).__name__}")
        with self._lock:
            previous = self._load(key)
            size = self.usage() + len(value) - (len(previous) if previous is not None else -len(key))
            if size > self.quota:
                raise QuotaExceededError(key, size, self.quota)
            self._save(key, value)
        self._broadcast(key, source)

    def remove(self, key: str, source: Optional[ChangeSignal] = None) -> None:
        with self._lock:
            if self._load(key) is None:
                return
            self._delete(key)
        self._broadcast(key, source)

    def clear(self, source: Optional[ChangeSignal] = None) -> None:
        with self._lock:
            for key in self.keys():
                self._delete(key)
        self._broadcast(None, source)

    def keys(self) -> List[str]:
        return [key for key, _ in self.items()]

    def usage(self) -> int:
        return sum(len(key) + len(value) for key, value in self.items())

    # Cross-context notification
    def attach(self, signal: ChangeSignal) -> None:
        if signal not in self._contexts:
            self._contexts.append(signal)

    def detach(self, signal: ChangeSignal) -> None:
        if signal in self._contexts:
            self._contexts.remove(signal)

    def _broadcast(self, key: Optional[str], source: Optional[ChangeSignal]) -> None:
        for signal in list(self._contexts):
            if signal is not source:
                signal.emit(StoreChanged(key=key))


class MemoryRecordStore(KeyedRecordStore):
    def __init__(self, quota: int = STORE_QUOTA_BYTES):
        super().__init__(quota)
        self._data: Dict[str, str] = {}

    def _load(self, key):
        return self._data.get(key)

    def _save(self, key, value):
        self._data[key] = value

    def _delete(self, key):
        self._data.pop(key, None)

    def items(self):
        return iter(list(self._data.items()))


class FileRecordStore(MemoryRecordStore):
    """Memory store mirrored to a single JSON file after every change."""

    def __init__(self, path, quota: int = STORE_QUOTA_BYTES):
        super().__init__(quota)
        self.path = Path(path)
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except ValueError as e:
                logger.error("Could not read content store %s: %s", self.path, e)
                return
            if not isinstance(data, dict):
                logger.error("Could not read content store %s: expected an object", self.path)
                return
            for key, value in data.items():
                if isinstance(value, str):
                    self._data[key] = value
                else:
                    logger.warning("Dropping non-string value for %s in %s", key, self.path)

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=self.path.name + ".",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            json.dump(self._data, tmp, ensure_ascii=False)
        try:
            os.replace(tmp.name, self.path)
        except OSError:
            os.unlink(tmp.name)
            raise

    def _save(self, key, value):
        super()._save(key, value)
        self._flush()

    def _delete(self, key):
        super()._delete(key)
        self._flush()


class MongoRecordStore(KeyedRecordStore):
    """One document per key: {_id: key, value: str}."""

    def __init__(self, database, collection: str = "content", quota: int = STORE_QUOTA_BYTES):
        super().__init__(quota)
        self.collection = database[collection]

    def _load(self, key):
        doc = self.collection.find_one({"_id": key})
        return doc["value"] if doc else None

    def _save(self, key, value):
        self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def _delete(self, key):
        self.collection.delete_one({"_id": key})

    def items(self):
        for doc in self.collection.find({}):
            yield doc["_id"], doc["value"]


def open_store() -> KeyedRecordStore:
    """Pick the store backend from configuration."""
    if db is not None:
        logger.info("Using MongoDB content store (%s)", DATABASE_NAME)
        return MongoRecordStore(db)
    if CONTENT_STORE_PATH:
        logger.info("Using file content store at %s", CONTENT_STORE_PATH)
        return FileRecordStore(CONTENT_STORE_PATH)
    logger.warning("No persistent content store configured; content lives in memory")
    return MemoryRecordStore()
