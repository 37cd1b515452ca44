from flask import current_app

from taskboard.services.task_service import TaskService

_EXTENSION_KEY = "taskboard.service"


def register_task_service(app, service: TaskService) -> None:
    app.extensions[_EXTENSION_KEY] = service


def get_task_service() -> TaskService:
    return current_app.extensions[_EXTENSION_KEY]
