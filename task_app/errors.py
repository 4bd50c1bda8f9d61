"""
Error types raised by the task service.

Every error carries the HTTP status code it is reported with, so the
blueprint error handler can turn any of them into a response without
knowing which handler raised it.
"""

from __future__ import annotations


class TaskServiceError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BodyReadError(TaskServiceError):
    """The request body could not be read."""


class ParseError(TaskServiceError):
    """The request body is not a valid task payload."""


class DuplicateTaskError(TaskServiceError):
    """A task with the given id is already stored."""

    def __init__(self, task_id: str) -> None:
        super().__init__("record with this id already exists")
        self.task_id = task_id


class TaskNotFoundError(TaskServiceError):
    """No task with the given id is stored."""

    def __init__(self, task_id: str) -> None:
        super().__init__("task with this ID not found")
        self.task_id = task_id


class SerializationError(TaskServiceError):
    """A task could not be encoded as JSON."""

    status_code = 500
