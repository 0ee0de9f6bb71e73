"""
Storage Adapter - the task list's only persistence boundary.

The whole ordered list is serialized as one JSON array under a single key.
Every save replaces the previous value. Loads validate each record and fall
back to an empty list when the key is missing or its content is malformed.
"""

import json
import logging
import threading
from typing import List, Sequence

from models.task import TaskRecord
from services.errors import InvalidArgument

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class StorageAdapter:
    """
    Saves and loads the task list under one fixed key.

    Writes are serialized so concurrent writers cannot interleave partial
    values; the last completed write wins.
    """

    def __init__(self, backend, key: str = DEFAULT_STORAGE_KEY):
        self.backend = backend
        self.key = key
        self._write_lock = threading.Lock()

    def save(self, tasks: Sequence[TaskRecord]) -> str:
        """
        Serialize the full list and replace the stored value.

        Returns:
            The JSON text that was written
        """
        payload = json.dumps([t.to_dict() for t in tasks])
        with self._write_lock:
            self.backend.set(self.key, payload)
        logger.debug(f"Saved {len(tasks)} tasks under key={self.key}")
        return payload

    def load(self) -> List[TaskRecord]:
        """
        Deserialize the stored list.

        Returns an empty list when the key is absent or the stored text is not
        a JSON array of valid task records.
        """
        raw = self.backend.get(self.key)
        if raw is None:
            logger.debug(f"No stored tasks under key={self.key}")
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Stored tasks under key={self.key} are not valid JSON, starting empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Stored tasks under key={self.key} are not a list ({type(data).__name__}), starting empty")
            return []

        try:
            tasks = [TaskRecord.from_dict(item) for item in data]
        except InvalidArgument as e:
            logger.warning(f"Stored tasks under key={self.key} failed validation, starting empty: {e.message}")
            return []

        logger.info(f"Loaded {len(tasks)} tasks from key={self.key}")
        return tasks

    def clear(self) -> None:
        with self._write_lock:
            self.backend.delete(self.key)
