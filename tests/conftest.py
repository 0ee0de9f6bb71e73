"""
Root pytest configuration and fixtures for unit and integration tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Test configuration
os.environ['FLASK_ENV'] = 'testing'
os.environ['SESSION_SECRET'] = 'test-secret-key-for-testing-only'
os.environ.pop('TASKLIST_REMOTE_URL', None)

from app import create_app  # noqa: E402
from config import TestingConfig  # noqa: E402
from extensions import get_handles  # noqa: E402
from models.task import TaskRecord, TaskStatus  # noqa: E402
from services.api_service import ApiService  # noqa: E402
from services.key_value_store import make_key_value_store  # noqa: E402
from services.storage_adapter import StorageAdapter  # noqa: E402
from services.task_list_controller import TaskListController  # noqa: E402


@pytest.fixture
def mocked_remote_tasks():
    """The two records served by the mocked /api/todos endpoint."""
    return [
        TaskRecord(id=1, text='Mocked Task 1', status=TaskStatus.PENDING),
        TaskRecord(id=2, text='Mocked Task 2', status=TaskStatus.DOING),
    ]


@pytest.fixture
def memory_backend():
    return make_key_value_store()


@pytest.fixture
def storage(memory_backend):
    return StorageAdapter(memory_backend)


@pytest.fixture
def api_client():
    return ApiService()


@pytest.fixture
def controller(storage, api_client):
    ctrl = TaskListController(storage, api_client)
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def app():
    """Create and configure a test Flask application backed by in-memory SQLite."""
    test_app = create_app(TestingConfig)
    yield test_app
    get_handles(test_app).controller.shutdown()


@pytest.fixture
def client(app):
    """Create a test client for the Flask application."""
    return app.test_client()


@pytest.fixture
def handles(app):
    """Controller and collaborators wired into the test app."""
    return get_handles(app)
