# src/todolist/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import StrEnum

from .errors import InvalidArgument


class Priority(StrEnum):
    """Task urgency. Display only: no ordering semantics."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_raw(cls, raw: Priority | str) -> Priority:
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgument(f"unknown priority: {raw!r}") from None


class TaskStatus(StrEnum):
    """
    Workflow stage.

    Statuses form a closed cycle under TaskStatus.next():
      backlog -> todo -> inProgress -> done -> backlog
    """

    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "inProgress"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> TaskStatus:
        return _NEXT_STATUS[self]

    @classmethod
    def from_raw(cls, raw: TaskStatus | str) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise InvalidArgument(f"unknown status: {raw!r}") from None


_NEXT_STATUS: dict[TaskStatus, TaskStatus] = {
    TaskStatus.BACKLOG: TaskStatus.TODO,
    TaskStatus.TODO: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.DONE,
    TaskStatus.DONE: TaskStatus.BACKLOG,
}


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class TaskFields:
    """Complete replacement record for an edit: every Task field except the id."""

    title: str
    description: str
    priority: Priority
    status: TaskStatus


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    priority: Priority
    status: TaskStatus

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE

    def fields(self) -> TaskFields:
        return TaskFields(
            title=self.title,
            description=self.description,
            priority=self.priority,
            status=self.status,
        )
