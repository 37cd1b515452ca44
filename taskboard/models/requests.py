"""Typed request bodies, validated before they reach the stores."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from taskboard.errors import ValidationError


def _as_object(payload: Any) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


@dataclass(frozen=True)
class CreateTaskRequest:
    text: str

    @classmethod
    def from_json(cls, payload: Optional[Mapping[str, Any]]) -> "CreateTaskRequest":
        payload = _as_object(payload)
        text = payload.get("text")
        if text is not None and not isinstance(text, str):
            raise ValidationError("Field 'text' must be a string")
        text = (text or "").strip()
        if not text:
            raise ValidationError("Field 'text' is required")
        return cls(text=text)


@dataclass(frozen=True)
class ClearCompletedRequest:
    ids: List[int]

    @classmethod
    def from_json(cls, payload: Optional[Mapping[str, Any]]) -> "ClearCompletedRequest":
        payload = _as_object(payload)
        ids = payload.get("ids")
        if ids is None:
            raise ValidationError("Field 'ids' is required")
        if not isinstance(ids, list):
            raise ValidationError("Field 'ids' must be a list of integers")
        if not ids:
            raise ValidationError("No task IDs provided")
        # bool is a subclass of int; true/false are not task ids
        if any(isinstance(i, bool) or not isinstance(i, int) for i in ids):
            raise ValidationError("Field 'ids' must be a list of integers")
        return cls(ids=list(dict.fromkeys(ids)))
