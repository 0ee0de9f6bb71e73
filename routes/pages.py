# routes/pages.py
"""
To-do list page. Form posts go to the controller and redirect back to the
list, so the input box is empty again after a successful add. Text that is
rejected as empty is echoed back to the submitting visitor only.
"""
import logging

from flask import Blueprint, redirect, render_template, request, url_for

from extensions import get_controller
from models.task import TaskStatus

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__)


def _render_index(draft: str = ""):
    return render_template(
        "index.html",
        tasks=get_controller().tasks,
        draft=draft,
        statuses=TaskStatus.choices(),
    )


@pages_bp.route("/")
def index():
    return _render_index()


@pages_bp.route("/tasks", methods=["POST"])
def add_task():
    text = request.form.get("text", "")
    if get_controller().add_task(text) is None:
        # Rejected text stays in this visitor's input only
        return _render_index(draft=text)
    return redirect(url_for("pages.index"))


@pages_bp.route("/tasks/<int:position>/delete", methods=["POST"])
def delete_task(position: int):
    get_controller().remove_task(position)
    return redirect(url_for("pages.index"))


@pages_bp.route("/tasks/<int:position>/status", methods=["POST"])
def update_status(position: int):
    get_controller().set_status(position, request.form.get("status", ""))
    return redirect(url_for("pages.index"))
