"""
Task List Controller

Owns the in-memory ordered list of task records. Every mutation re-saves the
full list through the storage adapter. The new list is saved first; a
mutation whose save fails leaves the in-memory list unchanged.

Startup:
1. load_initial() seeds the list from storage
2. if a remote source is configured, the fetch runs on a background worker
3. when it resolves, its records replace the whole list (no merge)

Whichever write lands last wins. A failed fetch is logged and the
storage-seeded list is kept.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from typing import Iterable, List, Optional, Union

from models.task import TaskRecord, TaskStatus
from services.errors import InvalidArgument, RemoteFetchError, StorageError

logger = logging.getLogger(__name__)


class TaskListController:
    """
    Add/remove/update-status operations over a positional task list.

    Collaborators are injected so tests can substitute any of them:
        storage: StorageAdapter (save/load)
        api_client: object with post_task(text)
        remote_source: object with fetch() -> list of TaskRecord, or None
    """

    def __init__(self, storage, api_client, remote_source=None):
        self.storage = storage
        self.api_client = api_client
        self.remote_source = remote_source
        self._tasks: List[TaskRecord] = []
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def tasks(self) -> List[TaskRecord]:
        with self._lock:
            return list(self._tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _commit(self, new_tasks: List[TaskRecord]) -> None:
        # A failed save raises before the in-memory list is swapped
        self.storage.save(new_tasks)
        self._tasks = new_tasks

    def _check_position(self, position: int) -> None:
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidArgument(f"Position must be an integer, got {position!r}", context={"position": position})
        if not 0 <= position < len(self._tasks):
            raise InvalidArgument(
                f"Position {position} out of range (list has {len(self._tasks)} tasks)",
                context={"position": position, "length": len(self._tasks)}
            )

    def add_task(self, text: str) -> Optional[TaskRecord]:
        """
        Append a pending task.

        Empty or whitespace-only text is ignored: nothing is stored, nothing is
        posted, and None is returned.

        Raises:
            StorageError: if the list could not be saved; nothing is posted then
        """
        trimmed = (text or "").strip()
        if not trimmed:
            logger.debug("Ignoring empty task text")
            return None

        with self._lock:
            record = TaskRecord(text=trimmed, status=TaskStatus.PENDING)
            self._commit(self._tasks + [record])
            position = len(self._tasks) - 1
            self.api_client.post_task(text)

        logger.info(f"Added task at position {position}: {trimmed!r}")
        return record

    def remove_task(self, position: int) -> TaskRecord:
        """
        Remove the task at ``position``; later tasks shift down by one.

        Raises:
            InvalidArgument: if position is out of range
            StorageError: if the list could not be saved
        """
        with self._lock:
            self._check_position(position)
            record = self._tasks[position]
            self._commit(self._tasks[:position] + self._tasks[position + 1:])

        logger.info(f"Removed task at position {position}: {record.text!r}")
        return record

    def set_status(self, position: int, status: Union[TaskStatus, str]) -> TaskRecord:
        """
        Change the status of the task at ``position``. No transition rules apply.

        Raises:
            InvalidArgument: if position is out of range or status is unknown
            StorageError: if the list could not be saved
        """
        new_status = TaskStatus.coerce(status)
        with self._lock:
            self._check_position(position)
            record = replace(self._tasks[position], status=new_status)
            new_tasks = list(self._tasks)
            new_tasks[position] = record
            self._commit(new_tasks)

        logger.info(f"Set task {position} status to {new_status.value}")
        return record

    def replace_all(self, records: Iterable[TaskRecord]) -> None:
        """Replace the whole list and persist it."""
        with self._lock:
            self._commit(list(records))
            count = len(self._tasks)
        logger.info(f"Replaced task list with {count} tasks")

    def load_initial(self) -> Optional[Future]:
        """
        Seed the list from storage, then start the remote fetch if configured.

        Returns:
            Future for the background fetch, or None when there is no remote source
        """
        with self._lock:
            self._tasks = self.storage.load()
            count = len(self._tasks)
        logger.info(f"Seeded {count} tasks from storage")

        if self.remote_source is None:
            return None

        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="task-fetch")
        return self._executor.submit(self._fetch_remote)

    def _fetch_remote(self) -> bool:
        try:
            records = self.remote_source.fetch()
        except RemoteFetchError as e:
            logger.warning(f"Remote task fetch failed, keeping stored tasks: {e.message}")
            return False

        try:
            self.replace_all(records)
        except StorageError as e:
            logger.warning(f"Could not save fetched tasks, keeping stored tasks: {e.message}")
            return False
        return True

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None
