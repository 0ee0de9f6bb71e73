# services/key_value_store.py
"""
Key-value store with a SQL backend (default) or in-memory fallback.
Plays the role browser local storage plays for a client-side app: a flat
mapping of string keys to text values.
"""
import contextlib
import logging
import threading
from typing import Dict, Optional

from flask import has_app_context
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from services.errors import StorageError

logger = logging.getLogger(__name__)


class _MemoryKeyValueStore:
    """Dict-backed store for when no database is configured."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> int:
        with self._lock:
            return 1 if self._data.pop(key, None) is not None else 0

    def ping(self) -> bool:
        return True


class _SQLKeyValueStore:
    """
    StorageEntry-backed store.

    Calls made outside an app context (e.g. from a background worker) push
    one for the given app.
    """

    def __init__(self, db, app=None):
        self._db = db
        self._app = app

    def _context(self):
        if self._app is not None and not has_app_context():
            return self._app.app_context()
        return contextlib.nullcontext()

    def get(self, key: str) -> Optional[str]:
        from models import StorageEntry

        with self._context():
            try:
                entry = self._db.session.get(StorageEntry, key)
                return entry.value if entry is not None else None
            except SQLAlchemyError as e:
                self._db.session.rollback()
                logger.warning(f"Storage get failed for key={key}: {e}")
                raise StorageError(f"Failed to read key {key!r}", context={"key": key}) from e

    def set(self, key: str, value: str) -> None:
        from models import StorageEntry

        with self._context():
            try:
                entry = self._db.session.get(StorageEntry, key)
                if entry is None:
                    self._db.session.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
                self._db.session.commit()
            except SQLAlchemyError as e:
                self._db.session.rollback()
                logger.warning(f"Storage set failed for key={key}: {e}")
                raise StorageError(f"Failed to write key {key!r}", context={"key": key}) from e

    def delete(self, key: str) -> int:
        from models import StorageEntry

        with self._context():
            try:
                entry = self._db.session.get(StorageEntry, key)
                if entry is None:
                    return 0
                self._db.session.delete(entry)
                self._db.session.commit()
                return 1
            except SQLAlchemyError as e:
                self._db.session.rollback()
                logger.warning(f"Storage delete failed for key={key}: {e}")
                raise StorageError(f"Failed to delete key {key!r}", context={"key": key}) from e

    def ping(self) -> bool:
        with self._context():
            try:
                self._db.session.execute(text("SELECT 1")).fetchone()
                self._db.session.rollback()
                return True
            except SQLAlchemyError as e:
                self._db.session.rollback()
                logger.warning(f"Storage health check failed: {e}")
                return False


def make_key_value_store(db=None, app=None):
    """Create store instance - SQL if a database is given, otherwise in-memory."""
    if db is None:
        logger.info("Using in-memory key-value store")
        return _MemoryKeyValueStore()

    logger.info("Using SQL key-value store")
    return _SQLKeyValueStore(db, app=app)
