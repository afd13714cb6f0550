# src/todolist/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for errors raised by the task subsystem."""


class InvalidArgument(TaskStoreError, ValueError):
    """A priority/status outside its closed set, or a blank title."""


class IndexOutOfRange(TaskStoreError, IndexError):
    """Positional delete referenced a position not present in the collection."""


class TaskNotFound(TaskStoreError, LookupError):
    """Unknown task id (raised only by stores built with strict_lookup=True)."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
