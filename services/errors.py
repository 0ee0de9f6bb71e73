"""
Task List Error Types

Invalid input (bad position, unknown status, malformed record) is raised as
InvalidArgument. Storage and remote failures have their own types so callers
can decide whether to fall back or surface them.
"""

from typing import Any, Dict, Optional


class TaskListError(Exception):
    """Base exception for task list errors."""
    status_code = 500

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """JSON error body returned by the /api/ routes."""
        body = {'error': self.message, 'type': self.__class__.__name__}
        if self.context:
            body['context'] = self.context
        return body


class InvalidArgument(TaskListError):
    """Out-of-range position, unknown status or malformed task record."""
    status_code = 400


class StorageError(TaskListError):
    """Key-value backend failed to read or write."""
    status_code = 503


class RemoteFetchError(TaskListError):
    """Startup fetch from the remote task source failed."""
    status_code = 502
