"""
Health Check Endpoints

1. /health/live - Liveness probe (is the process alive?)
2. /health/ready - Readiness probe (can the storage backend be reached?)
"""

import time
import logging
from datetime import datetime, timezone
from typing import Dict, Any
from flask import Blueprint, jsonify

from extensions import get_handles

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__, url_prefix='/health')

# Track startup time for uptime calculation
_startup_time = time.time()


def get_uptime_seconds() -> float:
    """Get application uptime in seconds."""
    return time.time() - _startup_time


def check_storage_health() -> Dict[str, Any]:
    """
    Check the key-value backend behind the storage adapter.

    Returns dict with:
    - healthy: bool
    - latency_ms: response time
    - type: backend class name
    """
    backend = get_handles().storage.backend
    start = time.time()
    healthy = bool(backend.ping())
    latency_ms = (time.time() - start) * 1000
    return {
        "healthy": healthy,
        "latency_ms": round(latency_ms, 2),
        "type": type(backend).__name__.strip('_')
    }


def check_startup_fetch() -> Dict[str, Any]:
    """Report the state of the startup fetch (not critical for readiness)."""
    handles = get_handles()
    if handles.remote_source is None:
        return {"status": "not_configured"}
    future = handles.startup_fetch
    if future is None or not future.done():
        return {"status": "pending"}
    if future.exception() is not None:
        return {"status": "failed", "error": str(future.exception())[:100]}
    return {"status": "applied" if future.result() else "failed"}


@health_bp.route('/live')
def liveness():
    """
    Liveness probe - returns 200 if the Flask process is running.
    No external dependencies.
    """
    return jsonify({
        "status": "alive",
        "uptime_seconds": round(get_uptime_seconds(), 2)
    }), 200


@health_bp.route('/ready')
def readiness():
    """
    Readiness probe - 200 if storage is reachable, 503 otherwise.
    """
    checks = {
        "storage": check_storage_health(),
        "startup_fetch": check_startup_fetch()
    }
    is_ready = checks["storage"].get("healthy", False)

    return jsonify({
        "status": "ready" if is_ready else "not_ready",
        "checks": checks,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }), 200 if is_ready else 503
