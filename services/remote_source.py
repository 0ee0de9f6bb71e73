"""
Remote Task Source

Fetches the initial task list from a remote endpoint with a single
unconditional GET. The response is a JSON array of ``{id, text, status}``
records. No retry and no cancellation; one timeout guards the request.
"""

import logging
from typing import List, Optional

import requests

from models.task import TaskRecord
from services.errors import InvalidArgument, RemoteFetchError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_PATH = "/api/todos"
DEFAULT_TIMEOUT_SECONDS = 5.0


class RemoteTaskSource:
    """Reads the task list from ``{base_url}{path}``."""

    def __init__(
        self,
        base_url: str,
        path: str = DEFAULT_REMOTE_PATH,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.path = path if path.startswith('/') else f'/{path}'
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def fetch(self) -> List[TaskRecord]:
        """
        Fetch and parse the remote task list.

        Returns:
            Records in the order the remote returned them

        Raises:
            RemoteFetchError: on connection failure, timeout, non-2xx status,
                non-JSON body, non-array body or an invalid record
        """
        logger.info(f"Fetching tasks from {self.url}")
        try:
            response = self.session.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise RemoteFetchError(f"Request to {self.url} failed: {e}", context={"url": self.url}) from e

        if not response.ok:
            raise RemoteFetchError(
                f"Failed to fetch tasks: {response.status_code}",
                context={"url": self.url, "status_code": response.status_code}
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteFetchError(f"Response from {self.url} is not JSON", context={"url": self.url}) from e

        if not isinstance(data, list):
            raise RemoteFetchError(
                f"Expected a JSON array from {self.url}, got {type(data).__name__}",
                context={"url": self.url}
            )

        try:
            tasks = [TaskRecord.from_dict(item) for item in data]
        except InvalidArgument as e:
            raise RemoteFetchError(f"Invalid task from {self.url}: {e.message}", context={"url": self.url}) from e

        logger.info(f"Fetched {len(tasks)} tasks from {self.url}")
        return tasks


def make_remote_source(
    base_url: Optional[str],
    path: str = DEFAULT_REMOTE_PATH,
    timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> Optional[RemoteTaskSource]:
    """Create the remote source, or None when no URL is configured."""
    if not base_url:
        logger.info("No remote task source configured - startup fetch disabled")
        return None
    return RemoteTaskSource(base_url, path=path, timeout=timeout)
