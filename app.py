"""
Task List - Flask application factory.

Wires the storage adapter, API client and optional remote source into one
TaskListController, seeds it, and registers the HTML view, JSON API and
health blueprints.
"""
import logging

from flask import Flask, jsonify, request

from config import get_config
from extensions import EXTENSION_KEY, TaskListHandles
from models import db
from services.api_service import ApiService
from services.errors import TaskListError
from services.key_value_store import make_key_value_store
from services.remote_source import make_remote_source
from services.storage_adapter import StorageAdapter
from services.task_list_controller import TaskListController

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # requests/urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))


def _make_storage(app: Flask) -> StorageAdapter:
    database_url = app.config.get("SQLALCHEMY_DATABASE_URI")
    if database_url:
        db.init_app(app)
        with app.app_context():
            db.create_all()
        backend = make_key_value_store(db, app=app)
    else:
        backend = make_key_value_store()
    return StorageAdapter(backend, key=app.config["TASKLIST_STORAGE_KEY"])


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(TaskListError)
    def handle_task_list_error(error: TaskListError):
        logger.warning(f"{error.__class__.__name__} on {request.method} {request.path}: {error.message}")
        if request.path.startswith("/api/"):
            return jsonify(error.to_dict()), error.status_code
        return error.message, error.status_code


def create_app(config_object=None, *, overrides=None, storage=None, api_client=None, remote_source=None):
    """
    Create and configure the Flask application.

    Args:
        config_object: config class/object (defaults to get_config())
        overrides: dict applied on top of the config object
        storage: StorageAdapter to use instead of building one from config
        api_client: ApiService-compatible client (post_task/patch_task/put_task)
        remote_source: object with fetch(); built from TASKLIST_REMOTE_URL when omitted

    Returns:
        Flask app with its TaskListHandles on app.extensions["tasklist"]
    """
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())
    if overrides:
        app.config.update(overrides)

    _configure_logging(app)

    if storage is None:
        storage = _make_storage(app)
    if api_client is None:
        api_client = ApiService()
    if remote_source is None:
        remote_source = make_remote_source(
            app.config.get("TASKLIST_REMOTE_URL"),
            path=app.config.get("TASKLIST_REMOTE_PATH", "/api/todos"),
            timeout=app.config.get("TASKLIST_REMOTE_TIMEOUT", 5.0),
        )

    controller = TaskListController(storage, api_client, remote_source=remote_source)
    startup_fetch = controller.load_initial()

    app.extensions[EXTENSION_KEY] = TaskListHandles(
        controller=controller,
        storage=storage,
        api_client=api_client,
        remote_source=remote_source,
        startup_fetch=startup_fetch,
    )

    from routes.pages import pages_bp
    from routes.api_tasks import api_tasks_bp
    from routes.health import health_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_tasks_bp)
    app.register_blueprint(health_bp)

    _register_error_handlers(app)

    logger.info(f"Task list app ready with {len(controller)} tasks")
    return app
