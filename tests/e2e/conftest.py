"""
E2E test configuration and fixtures for Playwright browser tests.

Each test gets its own app served on a free local port, so the test can reach
the app's collaborators (spy on the API client, wait for the startup fetch)
while the browser drives the page. A second local server stands in for the
remote /api/todos endpoint.
"""
import pytest

from app import create_app
from config import TestingConfig
from extensions import get_handles
from servers import MOCKED_TODOS, LiveServer, make_mock_remote


@pytest.fixture(scope="session")
def e2e_browser():
    """Headless Chromium, or skip when playwright or its browsers are not installed."""
    sync_api = pytest.importorskip("playwright.sync_api")
    try:
        playwright = sync_api.sync_playwright().start()
    except Exception as e:
        pytest.skip(f"Playwright could not start: {e}")
    try:
        browser = playwright.chromium.launch(headless=True)
    except Exception as e:
        playwright.stop()
        pytest.skip(f"Chromium not available: {e}")

    yield browser

    browser.close()
    playwright.stop()


@pytest.fixture
def page(e2e_browser):
    context = e2e_browser.new_context(viewport={"width": 1280, "height": 720})
    page = context.new_page()
    page.set_default_timeout(5000)
    yield page
    context.close()


@pytest.fixture
def live_app():
    """Start the task list app; returns (server, handles)."""
    started = []

    def _start(**create_app_kwargs):
        app = create_app(TestingConfig, **create_app_kwargs)
        server = LiveServer(app).start()
        started.append(server)
        return server, get_handles(app)

    yield _start

    for server in started:
        get_handles(server.app).controller.shutdown(wait=False)
        server.stop()


@pytest.fixture
def running_app(page, live_app):
    """App with no remote source, with the page already opened on it."""
    server, handles = live_app()
    page.goto(server.url)
    return server, handles


@pytest.fixture
def mock_remote():
    remote = make_mock_remote(MOCKED_TODOS)
    server = LiveServer(remote).start()
    yield server
    server.stop()
