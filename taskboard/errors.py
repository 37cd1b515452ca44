"""Error taxonomy shared by the stores, the service and the HTTP layer.

Every error carries the HTTP status it is reported with, so the Flask error
handler can render any of them as ``{"error": message}`` without a lookup table.
"""

from __future__ import annotations


class TaskboardError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """Missing or empty required input."""

    status_code = 400


class NotFoundError(TaskboardError):
    """The referenced task id does not exist."""

    status_code = 404


class StorageError(TaskboardError):
    """Any failure of the persistence engine, transient or not."""

    status_code = 500
