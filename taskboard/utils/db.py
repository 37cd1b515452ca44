from __future__ import annotations

import atexit
import contextlib
import logging
import sqlite3
import weakref
from collections.abc import Iterator
from pathlib import Path

from flask import Flask, current_app

from taskboard.errors import StorageError

logger = logging.getLogger(__name__)

_EXTENSION_KEY = "taskboard.db"

# Handles still open at interpreter exit; weak so finished apps can be collected
_open_databases: weakref.WeakSet[Database] = weakref.WeakSet()

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    task_id INTEGER NOT NULL,
    task_text TEXT NOT NULL,
    action TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""


class Database:
    """
    Process-wide handle to the SQLite file.

    The handle holds no open connection; every operation borrows a short-lived
    one through connect(), so a single instance can be shared by all request
    threads and SQLite does the serialization.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._closed = False
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            logger.info("Database closed path=%s", self._path)

    @contextlib.contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """
        Yield a connection, committing on success and rolling back on error.

        Any sqlite3.Error raised while opening or using the connection comes
        out as StorageError.
        """
        if self._closed:
            raise StorageError("Database is closed")
        try:
            conn = sqlite3.connect(str(self._path), timeout=30.0)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database: {exc}") from exc
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        with self.connect() as conn:
            conn.executescript(_SCHEMA)


def init_app(app: Flask) -> Database:
    """Create the shared handle, make sure both tables exist and register it on the app."""
    database = Database(app.config["DATABASE_PATH"])
    database.ensure_schema()
    app.extensions[_EXTENSION_KEY] = database
    _open_databases.add(database)
    logger.info("Database ready path=%s", database.path)
    return database


def get_db() -> Database:
    return current_app.extensions[_EXTENSION_KEY]


@atexit.register
def close_all() -> None:
    for database in list(_open_databases):
        database.close()
