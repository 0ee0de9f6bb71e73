"""
Application configuration loaded from environment variables (+ optional .env).

FLASK_ENV selects the config class; every setting can be overridden per
variable.
"""
import os

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.environ.get("SESSION_SECRET", "dev-secret-change-me")

    # Empty DATABASE_URL selects the in-memory key-value store
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///tasklist.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    TASKLIST_STORAGE_KEY = os.environ.get("TASKLIST_STORAGE_KEY", "tasks")
    TASKLIST_REMOTE_URL = os.environ.get("TASKLIST_REMOTE_URL", "")
    TASKLIST_REMOTE_PATH = os.environ.get("TASKLIST_REMOTE_PATH", "/api/todos")
    TASKLIST_REMOTE_TIMEOUT = _env_float("TASKLIST_REMOTE_TIMEOUT", 5.0)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key-for-testing-only"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    TASKLIST_REMOTE_URL = ""
    LOG_LEVEL = "DEBUG"


_CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(env=None):
    """Return the config class for ``env`` (defaults to FLASK_ENV, then development)."""
    env = env or os.environ.get("FLASK_ENV", "development")
    return _CONFIGS.get(env, DevelopmentConfig)
