from __future__ import annotations

import logging
import sqlite3
from datetime import datetime

from taskboard.errors import ValidationError
from taskboard.models.task_model import HistoryAction, HistoryEntry, timestamp_from_db, timestamp_to_db
from taskboard.utils.db import Database

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50


class HistoryLog:
    """
    Append-only log in the ``history`` table.

    Entries are never updated or deleted; they keep a copy of the task text so
    they remain readable after the task itself is gone.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
        return HistoryEntry(
            id=int(row["id"]),
            task_id=int(row["task_id"]),
            task_text=str(row["task_text"]),
            action=HistoryAction(row["action"]),
            created_at=timestamp_from_db(row["created_at"]),
        )

    def append(
        self,
        task_id: int,
        task_text: str,
        action: HistoryAction | str,
        timestamp: datetime,
    ) -> HistoryEntry:
        try:
            action = HistoryAction(action)
        except ValueError as exc:
            raise ValidationError(f"Unknown history action: {action!r}") from exc

        with self._db.connect() as conn:
            cur = conn.execute(
                "INSERT INTO history(task_id, task_text, action, created_at) VALUES (?, ?, ?, ?)",
                (int(task_id), task_text, action.value, timestamp_to_db(timestamp)),
            )
            rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for history insert")

        entry = HistoryEntry(
            id=int(rowid),
            task_id=int(task_id),
            task_text=task_text,
            action=action,
            created_at=timestamp,
        )
        logger.debug("History appended id=%s task_id=%s action=%s", entry.id, entry.task_id, action.value)
        return entry

    def list_recent(self, limit: int = DEFAULT_LIMIT) -> list[HistoryEntry]:
        if limit <= 0:
            return []
        with self._db.connect() as conn:
            rows = conn.execute(
                """
                SELECT id, task_id, task_text, action, created_at
                FROM history
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (int(limit),),
            ).fetchall()
            return [self._row_to_entry(r) for r in rows]
