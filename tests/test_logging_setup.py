# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskboard.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskboard.stores.task_store", logging.DEBUG))
    assert f.filter(_record("werkzeug", logging.INFO))
    assert not f.filter(_record("urllib3", logging.INFO))
    assert f.filter(_record("urllib3", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level="warning")

    logging.getLogger("taskboard.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    log_file = tmp_path / "logs" / "taskboard.log"
    assert "hello file" in log_file.read_text("utf-8")
    assert len(logging.getLogger().handlers) == 2


def test_setup_logging_console_only(restore_root_logging) -> None:
    setup_logging()
    assert len(logging.getLogger().handlers) == 1
