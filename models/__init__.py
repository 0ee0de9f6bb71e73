"""
Models package: SQLAlchemy models and plain task records.
"""

from flask_sqlalchemy import SQLAlchemy

from .base import Base

db = SQLAlchemy(model_class=Base)

from .storage_entry import StorageEntry  # noqa: E402
from .task import TaskRecord, TaskStatus  # noqa: E402

__all__ = ["db", "Base", "StorageEntry", "TaskRecord", "TaskStatus"]
