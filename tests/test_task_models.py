# tests/test_task_models.py

from __future__ import annotations

import pytest

from todolist.tasks.errors import InvalidArgument
from todolist.tasks.task_models import Priority, Task, TaskFields, TaskStatus


def test_status_values_match_wire_names() -> None:
    assert [s.value for s in TaskStatus] == ["backlog", "todo", "inProgress", "done"]
    assert [p.value for p in Priority] == ["high", "medium", "low"]


def test_status_next_is_a_single_cycle() -> None:
    start = TaskStatus.BACKLOG
    seen = [start]
    current = start.next()
    while current is not start:
        seen.append(current)
        current = current.next()
    assert seen == list(TaskStatus)


def test_labels() -> None:
    assert Priority.HIGH.label == "High"
    assert TaskStatus.IN_PROGRESS.label == "Inprogress"
    assert TaskStatus.BACKLOG.label == "Backlog"


def test_from_raw() -> None:
    assert Priority.from_raw("low") is Priority.LOW
    assert Priority.from_raw(Priority.MEDIUM) is Priority.MEDIUM
    assert TaskStatus.from_raw("inProgress") is TaskStatus.IN_PROGRESS

    with pytest.raises(InvalidArgument, match="priority"):
        Priority.from_raw("critical")
    with pytest.raises(InvalidArgument, match="status"):
        TaskStatus.from_raw("")
    # InvalidArgument is still a ValueError for callers that only know builtins.
    with pytest.raises(ValueError):
        TaskStatus.from_raw("archived")


def test_task_is_done_and_fields() -> None:
    task = Task(id="1", title="T", description="D", priority=Priority.LOW, status=TaskStatus.DONE)
    assert task.is_done
    assert task.fields() == TaskFields("T", "D", Priority.LOW, TaskStatus.DONE)

    task.status = TaskStatus.TODO
    assert not task.is_done
