from taskboard.models.requests import ClearCompletedRequest, CreateTaskRequest
from taskboard.models.task_model import HistoryAction, HistoryEntry, Task

__all__ = [
    "ClearCompletedRequest",
    "CreateTaskRequest",
    "HistoryAction",
    "HistoryEntry",
    "Task",
]
