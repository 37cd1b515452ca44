from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from taskboard.errors import StorageError
from taskboard.models.task_model import HistoryAction, HistoryEntry, Task, utcnow
from taskboard.stores.history_log import DEFAULT_LIMIT, HistoryLog
from taskboard.stores.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """
    Pairs every task mutation with its history entry.

    The two writes are not wrapped in a transaction: when the history append
    fails, the task change stays in place and the StorageError goes back to
    the caller, who must treat the mutation as possibly applied.
    """

    def __init__(self, tasks: TaskStore, history: HistoryLog, *, history_limit: int = DEFAULT_LIMIT) -> None:
        self.tasks = tasks
        self.history = history
        self.history_limit = history_limit

    def _log(self, task: Task, action: HistoryAction, when: datetime) -> HistoryEntry:
        try:
            return self.history.append(task.id, task.text, action, when)
        except StorageError:
            logger.exception(
                "History append failed after task mutation task_id=%s action=%s (not rolled back)",
                task.id,
                action.value,
            )
            raise

    def list_tasks(self) -> list[Task]:
        return self.tasks.list_tasks()

    def add_task(self, text: str) -> tuple[Task, HistoryEntry]:
        task = self.tasks.create_task(text)
        return task, self._log(task, HistoryAction.ADD, task.created_at)

    def toggle_task(self, task_id: int) -> tuple[Task, HistoryEntry]:
        task = self.tasks.toggle_completion(task_id)
        action = HistoryAction.for_completion(task.completed)
        return task, self._log(task, action, task.updated_at)

    def delete_task(self, task_id: int) -> HistoryEntry:
        task = self.tasks.delete_task(task_id)
        return self._log(task, HistoryAction.DELETE, utcnow())

    def clear_completed(self, ids: Iterable[int]) -> list[HistoryEntry]:
        removed = self.tasks.delete_tasks(ids)
        now = utcnow()
        return [self._log(task, HistoryAction.DELETE, now) for task in removed]

    def recent_history(self) -> list[HistoryEntry]:
        return self.history.list_recent(self.history_limit)
