"""
StorageEntry Model - single-key text storage
Server-side equivalent of browser local storage: one row per key, holding
the serialized value as text.
"""

from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, DateTime, func
from .base import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f'<StorageEntry key={self.key} size={len(self.value or "")}>'
