from flask import Blueprint, jsonify, request

from taskboard.models.requests import ClearCompletedRequest, CreateTaskRequest
from taskboard.services import get_task_service


tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.get("")
def list_tasks():
    tasks = get_task_service().list_tasks()
    return jsonify([t.to_dict() for t in tasks]), 200


@tasks_bp.post("")
def create_task():
    req = CreateTaskRequest.from_json(request.get_json(silent=True))
    task, entry = get_task_service().add_task(req.text)
    return jsonify(task=task.to_dict(), history=entry.to_dict()), 201


@tasks_bp.put("/<int:task_id>/toggle")
def toggle_task(task_id):
    task, entry = get_task_service().toggle_task(task_id)
    return jsonify(task=task.to_dict(), history=entry.to_dict()), 200


# The int converter keeps "completed" off the single-task route below.
@tasks_bp.delete("/completed")
def clear_completed():
    req = ClearCompletedRequest.from_json(request.get_json(silent=True))
    entries = get_task_service().clear_completed(req.ids)
    return jsonify(history=[e.to_dict() for e in entries]), 200


@tasks_bp.delete("/<int:task_id>")
def delete_task(task_id):
    entry = get_task_service().delete_task(task_id)
    return jsonify(history=entry.to_dict()), 200
