from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Dict


class HistoryAction(StrEnum):
    ADD = "add"
    COMPLETE = "complete"
    UNCOMPLETE = "uncomplete"
    DELETE = "delete"

    @classmethod
    def for_completion(cls, completed: bool) -> "HistoryAction":
        return cls.COMPLETE if completed else cls.UNCOMPLETE


def utcnow() -> datetime:
    return datetime.now(UTC)


def timestamp_to_db(value: datetime) -> str:
    # Fixed width so that ORDER BY on the text column is chronological
    return value.astimezone(UTC).isoformat(timespec="microseconds")


def timestamp_from_db(raw: str) -> datetime:
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(timespec="microseconds"),
            "updated_at": self.updated_at.isoformat(timespec="microseconds"),
        }


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    id: int
    task_id: int
    # Snapshot of the task text at the time of the action
    task_text: str
    action: HistoryAction
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "task_id": self.task_id,
            "task_text": self.task_text,
            "action": self.action.value,
            "created_at": self.created_at.isoformat(timespec="microseconds"),
        }
