# tests/test_task_store.py

from __future__ import annotations

import pytest

from taskboard.errors import NotFoundError, StorageError, ValidationError
from taskboard.stores.task_store import TaskStore
from taskboard.utils.db import Database


def test_create_then_list(task_store: TaskStore) -> None:
    assert task_store.list_tasks() == []

    task = task_store.create_task("buy milk")
    assert task.id > 0
    assert task.text == "buy milk"
    assert task.completed is False
    assert task.created_at == task.updated_at

    listed = task_store.list_tasks()
    assert [t.id for t in listed] == [task.id]
    assert listed[0].created_at == task.created_at


def test_list_is_newest_first(task_store: TaskStore) -> None:
    ids = [task_store.create_task(f"task {i}").id for i in range(3)]
    assert [t.id for t in task_store.list_tasks()] == list(reversed(ids))


@pytest.mark.parametrize("text", ["", "   ", None])
def test_create_rejects_empty_text(task_store: TaskStore, text) -> None:
    with pytest.raises(ValidationError):
        task_store.create_task(text)
    assert task_store.count_tasks() == 0


def test_get_unknown_task(task_store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        task_store.get_task(12345)


def test_toggle_is_an_involution_and_moves_updated_at(task_store: TaskStore) -> None:
    task = task_store.create_task("write report")

    once = task_store.toggle_completion(task.id)
    assert once.completed is True
    assert once.updated_at > task.updated_at
    assert once.created_at == task.created_at

    twice = task_store.toggle_completion(task.id)
    assert twice.completed is False
    assert twice.updated_at > once.updated_at

    stored = task_store.get_task(task.id)
    assert stored.completed is False
    assert stored.updated_at == twice.updated_at
    assert stored.updated_at >= stored.created_at


def test_toggle_unknown_task(task_store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        task_store.toggle_completion(999)


def test_delete_returns_snapshot_and_removes_row(task_store: TaskStore) -> None:
    task = task_store.create_task("call mom")
    task_store.toggle_completion(task.id)

    removed = task_store.delete_task(task.id)
    assert removed.id == task.id
    assert removed.text == "call mom"
    assert removed.completed is True

    with pytest.raises(NotFoundError):
        task_store.get_task(task.id)
    with pytest.raises(NotFoundError):
        task_store.delete_task(task.id)


def test_ids_are_not_reused_after_delete(task_store: TaskStore) -> None:
    first = task_store.create_task("a")
    task_store.delete_task(first.id)
    second = task_store.create_task("b")
    assert second.id > first.id


def test_delete_tasks_skips_unknown_ids(task_store: TaskStore) -> None:
    a = task_store.create_task("a")
    b = task_store.create_task("b")
    keep = task_store.create_task("keep")

    removed = task_store.delete_tasks([a.id, b.id, 9999])
    assert [t.id for t in removed] == [b.id, a.id]
    assert [t.id for t in task_store.list_tasks()] == [keep.id]


def test_delete_tasks_with_only_unknown_ids(task_store: TaskStore) -> None:
    task_store.create_task("a")
    assert task_store.delete_tasks([404, 405]) == []
    assert task_store.count_tasks() == 1


def test_delete_tasks_requires_ids(task_store: TaskStore) -> None:
    with pytest.raises(ValidationError):
        task_store.delete_tasks([])


def test_closed_database_raises_storage_error(database: Database, task_store: TaskStore) -> None:
    database.close()
    with pytest.raises(StorageError):
        task_store.list_tasks()


@pytest.mark.parametrize("task_id", [0, -1, 2**63, 10**20])
def test_ids_outside_sqlite_range_are_not_found(task_store: TaskStore, task_id: int) -> None:
    with pytest.raises(NotFoundError):
        task_store.get_task(task_id)
    with pytest.raises(NotFoundError):
        task_store.toggle_completion(task_id)
    with pytest.raises(NotFoundError):
        task_store.delete_task(task_id)


def test_delete_tasks_skips_ids_outside_sqlite_range(task_store: TaskStore) -> None:
    task = task_store.create_task("real")

    removed = task_store.delete_tasks([task.id, 2**70, -5])
    assert [t.id for t in removed] == [task.id]
    assert task_store.delete_tasks([2**64]) == []
