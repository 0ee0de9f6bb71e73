"""
Task Record Model
Plain data model for a single to-do entry: its text and lifecycle status.

Records are addressed by their position in the task list. Records that came
from the remote source also carry the remote ``id``; locally created records
have none.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from services.errors import InvalidArgument


class TaskStatus(str, Enum):
    """Task lifecycle labels. Any status may move to any other."""
    PENDING = "pending"
    DOING = "doing"
    DONE = "done"

    @classmethod
    def coerce(cls, value: Union["TaskStatus", str]) -> "TaskStatus":
        """
        Convert a raw value into a TaskStatus.

        Raises:
            InvalidArgument: if the value is not one of the known statuses
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            allowed = ", ".join(s.value for s in cls)
            raise InvalidArgument(
                f"Invalid status {value!r} (expected one of: {allowed})",
                context={"status": value},
            )

    @classmethod
    def choices(cls):
        return [s.value for s in cls]


@dataclass
class TaskRecord:
    text: str
    status: TaskStatus = TaskStatus.PENDING
    id: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to the storage/wire shape. ``id`` is only written when present."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data['id'] = self.id
        data['text'] = self.text
        data['status'] = self.status.value
        return data

    @classmethod
    def from_dict(cls, raw: Any) -> "TaskRecord":
        """
        Build a record from its storage/wire shape.

        Accepts ``{text, status}`` (local schema) and ``{id, text, status}``
        (remote schema). A missing status defaults to pending.

        Raises:
            InvalidArgument: if the shape is not a valid task record
        """
        if not isinstance(raw, Mapping):
            raise InvalidArgument(f"Task record must be an object, got {type(raw).__name__}")

        text = raw.get('text')
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgument("Task record text must be a non-empty string", context={"text": text})

        status = TaskStatus.coerce(raw.get('status', TaskStatus.PENDING.value))

        task_id = raw.get('id')
        if task_id is not None and (isinstance(task_id, bool) or not isinstance(task_id, (int, str))):
            raise InvalidArgument("Task record id must be an integer or a string", context={"id": task_id})

        return cls(text=text, status=status, id=task_id)

    def __repr__(self):
        return f'<TaskRecord text={self.text!r} status={self.status.value}>'
