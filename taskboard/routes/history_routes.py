from flask import Blueprint, jsonify

from taskboard.services import get_task_service


history_bp = Blueprint("history", __name__)


@history_bp.get("")
def list_history():
    entries = get_task_service().recent_history()
    return jsonify([e.to_dict() for e in entries]), 200
