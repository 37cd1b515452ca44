# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskboard.app import create_app
from taskboard.services.task_service import TaskService
from taskboard.stores.history_log import HistoryLog
from taskboard.stores.task_store import TaskStore
from taskboard.utils.db import Database


@pytest.fixture()
def database(tmp_path: Path) -> Database:
    """Real SQLite file per test; the stores' SQL is part of what we test."""
    db = Database(tmp_path / "tasks.db")
    db.ensure_schema()
    return db


@pytest.fixture()
def task_store(database: Database) -> TaskStore:
    return TaskStore(database)


@pytest.fixture()
def history_log(database: Database) -> HistoryLog:
    return HistoryLog(database)


@pytest.fixture()
def service(task_store: TaskStore, history_log: HistoryLog) -> TaskService:
    return TaskService(task_store, history_log)


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    path = tmp_path / "static"
    path.mkdir()
    (path / "index.html").write_text("<!doctype html><title>Taskboard</title>", "utf-8")
    (path / "app.js").write_text("console.log('taskboard');", "utf-8")
    return path


@pytest.fixture()
def app(tmp_path: Path, static_dir: Path):
    return create_app(
        {
            "TESTING": True,
            "DATABASE_PATH": tmp_path / "api" / "tasks.db",
            "STATIC_DIR": static_dir,
            "HISTORY_LIMIT": 50,
        }
    )


@pytest.fixture()
def client(app):
    return app.test_client()
