"""
Per-app handles to the task list controller and its collaborators.

create_app() stores one TaskListHandles on ``app.extensions["tasklist"]``.
Views and tests reach the controller through it instead of a module global.
"""
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app

EXTENSION_KEY = "tasklist"


@dataclass
class TaskListHandles:
    controller: Any
    storage: Any
    api_client: Any
    remote_source: Optional[Any] = None
    startup_fetch: Optional[Future] = None


def get_handles(app=None) -> TaskListHandles:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]


def get_controller(app=None):
    return get_handles(app).controller
