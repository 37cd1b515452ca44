from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable
from datetime import timedelta

from taskboard.errors import NotFoundError, ValidationError
from taskboard.models.task_model import Task, timestamp_from_db, timestamp_to_db, utcnow
from taskboard.utils.db import Database

logger = logging.getLogger(__name__)

_COLUMNS = "id, text, completed, created_at, updated_at"
_NEWEST_FIRST = "ORDER BY created_at DESC, id DESC"

# SQLite INTEGER is a signed 64-bit value; AUTOINCREMENT ids start at 1
_MAX_ID = 2**63 - 1


def _is_storable_id(task_id: int) -> bool:
    return 0 < task_id <= _MAX_ID


class TaskStore:
    """
    Owns the ``tasks`` table.

    Knows nothing about history; pairing mutations with log entries is the
    caller's job (see services.task_service).
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            text=str(row["text"]),
            completed=bool(row["completed"]),
            created_at=timestamp_from_db(row["created_at"]),
            updated_at=timestamp_from_db(row["updated_at"]),
        )

    @classmethod
    def _fetch_one(cls, conn: sqlite3.Connection, task_id: int) -> Task:
        if not _is_storable_id(int(task_id)):
            raise NotFoundError("Task not found")
        row = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
        if row is None:
            raise NotFoundError("Task not found")
        return cls._row_to_task(row)

    def count_tasks(self) -> int:
        with self._db.connect() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def list_tasks(self) -> list[Task]:
        with self._db.connect() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM tasks {_NEWEST_FIRST}").fetchall()
            return [self._row_to_task(r) for r in rows]

    def create_task(self, text: str) -> Task:
        if not text or not text.strip():
            raise ValidationError("Task text is required")

        now = utcnow()
        with self._db.connect() as conn:
            cur = conn.execute(
                "INSERT INTO tasks(text, completed, created_at, updated_at) VALUES (?, ?, ?, ?)",
                (text, 0, timestamp_to_db(now), timestamp_to_db(now)),
            )
            rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")

        task = Task(id=int(rowid), text=text, completed=False, created_at=now, updated_at=now)
        logger.debug("Task created id=%s", task.id)
        return task

    def get_task(self, task_id: int) -> Task:
        with self._db.connect() as conn:
            return self._fetch_one(conn, task_id)

    def toggle_completion(self, task_id: int) -> Task:
        """
        Flip ``completed`` and refresh ``updated_at``.

        ``updated_at`` always moves forward, even when the clock has not ticked
        since the previous write.
        """
        with self._db.connect() as conn:
            task = self._fetch_one(conn, task_id)
            now = max(utcnow(), task.updated_at + timedelta(microseconds=1))
            task.completed = not task.completed
            task.updated_at = now
            conn.execute(
                "UPDATE tasks SET completed = ?, updated_at = ? WHERE id = ?",
                (int(task.completed), timestamp_to_db(now), task.id),
            )
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove one task and return it as it was just before deletion."""
        with self._db.connect() as conn:
            task = self._fetch_one(conn, task_id)
            conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))
        logger.debug("Task deleted id=%s", task.id)
        return task

    def delete_tasks(self, ids: Iterable[int]) -> list[Task]:
        """
        Delete every task whose id is in ``ids``.

        Unknown ids are skipped. Returns snapshots of the tasks that were
        actually removed, newest first.
        """
        wanted = list(dict.fromkeys(int(i) for i in ids))
        if not wanted:
            raise ValidationError("No task IDs provided")
        wanted = [i for i in wanted if _is_storable_id(i)]
        if not wanted:
            return []

        placeholders = ",".join("?" for _ in wanted)
        with self._db.connect() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE id IN ({placeholders}) {_NEWEST_FIRST}",
                wanted,
            ).fetchall()
            tasks = [self._row_to_task(r) for r in rows]
            if tasks:
                found = [t.id for t in tasks]
                conn.execute(
                    f"DELETE FROM tasks WHERE id IN ({','.join('?' for _ in found)})",
                    found,
                )
        logger.debug("Tasks deleted requested=%d deleted=%d", len(wanted), len(tasks))
        return tasks
