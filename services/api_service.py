"""
Task API Service - placeholder backend notifications.

There is no real backend. Each call only logs its arguments and returns
nothing: no verification, no retry. The methods exist as interception points
so tests can spy on, stub or mock each call independently.
"""

import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)


class ApiService:
    """One-way task notifications."""

    def post_task(self, text: str) -> None:
        """Create notification, sent with the raw text the user entered."""
        logger.info(f"Posting task: {text!r}")

    def patch_task(self, task_id: Any, updates: Mapping[str, Any]) -> None:
        """Partial update: an identifier and the subset of fields that changed."""
        logger.info(f"Patching task with ID {task_id}: {dict(updates)}")

    def put_task(self, task: Dict[str, Any]) -> None:
        """Full replace with the entire record."""
        logger.info(f"Putting task: {task}")


api_service = ApiService()
