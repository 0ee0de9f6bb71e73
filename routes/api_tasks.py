"""
Tasks API Routes
JSON endpoints over the same task list the page shows. Tasks are addressed
by position.
"""

import logging

from flask import Blueprint, jsonify, request

from extensions import get_controller
from services.errors import InvalidArgument
from utils.etag_helper import with_etag

logger = logging.getLogger(__name__)

api_tasks_bp = Blueprint('api_tasks', __name__, url_prefix='/api/tasks')


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data


@api_tasks_bp.route('/', methods=['GET'])
@with_etag
def list_tasks():
    """List all tasks in order."""
    tasks = get_controller().tasks
    return jsonify({
        'tasks': [t.to_dict() for t in tasks],
        'count': len(tasks)
    })


@api_tasks_bp.route('/', methods=['POST'])
def create_task():
    """
    Add a task from {"text": ...}.

    Empty text is ignored: 200 with {"task": null} instead of 201.
    """
    data = _json_body()
    text = data.get('text', '')
    if not isinstance(text, str):
        raise InvalidArgument("text must be a string")

    controller = get_controller()
    record = controller.add_task(text)
    if record is None:
        return jsonify({'task': None, 'count': len(controller)}), 200

    return jsonify({
        'task': record.to_dict(),
        'position': len(controller) - 1
    }), 201


@api_tasks_bp.route('/<int:position>', methods=['PATCH'])
def update_task_status(position: int):
    """Set the status of the task at position from {"status": ...}."""
    data = _json_body()
    record = get_controller().set_status(position, data.get('status'))
    return jsonify({'task': record.to_dict(), 'position': position})


@api_tasks_bp.route('/<int:position>', methods=['DELETE'])
def delete_task(position: int):
    """Remove the task at position; later tasks shift down."""
    controller = get_controller()
    record = controller.remove_task(position)
    return jsonify({'deleted': record.to_dict(), 'count': len(controller)})
