"""
In-memory task storage.

The store is owned by the application object rather than living at
module level, and every operation runs under a single lock so that
concurrent requests see each check-then-write as one step.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from .errors import DuplicateTaskError, TaskNotFoundError
from .models import Task, seed_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe mapping of task id to Task."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()
        for task in tasks:
            self.insert(task)

    @classmethod
    def seeded(cls) -> TaskStore:
        """Create a store holding the demo tasks."""
        return cls(seed_tasks())

    def get_all(self) -> dict[str, Task]:
        """Return a snapshot of all tasks keyed by id, in insertion order."""
        with self._lock:
            return dict(self._tasks)

    def get(self, task_id: str) -> Task:
        """
        Look up a single task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def insert(self, task: Task) -> None:
        """
        Add a task.

        Raises:
            DuplicateTaskError: If a task with the same id is stored.
        """
        with self._lock:
            if task.id in self._tasks:
                raise DuplicateTaskError(task.id)
            self._tasks[task.id] = task
        logger.info("Stored task %r", task.id)

    def delete(self, task_id: str) -> None:
        """
        Remove a task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                raise TaskNotFoundError(task_id)
        logger.info("Deleted task %r", task_id)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
