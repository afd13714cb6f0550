# src/todolist/tasks/task_api.py

"""
Small high-level helpers for the presentation layer.

They take raw form values (plain strings) and gesture data, validate them,
and translate them into TaskStore calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.ports import TaskRepo
from .errors import IndexOutOfRange, InvalidArgument
from .task_models import Priority, Task, TaskFields, TaskStatus

logger = logging.getLogger(__name__)


def _clean_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise InvalidArgument("title is required")
    return title


def add_task_from_form(
    store: TaskRepo,
    *,
    title: str,
    description: str = "",
    priority: str = Priority.MEDIUM,
    status: str = TaskStatus.BACKLOG,
) -> Task:
    """Add form "Add" button. Blank titles are always rejected here."""
    return store.add(
        _clean_title(title),
        description or "",
        Priority.from_raw(priority),
        TaskStatus.from_raw(status),
    )


def toggle_task(store: TaskRepo, task_id: str) -> None:
    """Tap on a list row: advance the task to its next status."""
    store.cycle_status(task_id)


def save_task_edits(
    store: TaskRepo,
    task_id: str,
    *,
    title: str,
    description: str,
    priority: str,
    status: str,
) -> None:
    """Edit form "Save" button."""
    store.edit(
        task_id,
        TaskFields(
            title=_clean_title(title),
            description=description or "",
            priority=Priority.from_raw(priority),
            status=TaskStatus.from_raw(status),
        ),
    )


def swipe_delete(store: TaskRepo, visible: Sequence[Task], offsets: Iterable[int]) -> None:
    """
    Swipe-to-delete on a (possibly search-filtered) list.

    offsets index into `visible`; they are mapped to positions in the
    store's full collection before deleting.
    """
    offsets = set(offsets)
    bad = sorted(o for o in offsets if not 0 <= o < len(visible))
    if bad:
        raise IndexOutOfRange(f"offsets {bad} out of range for {len(visible)} visible tasks")

    wanted = {visible[o].id for o in offsets}
    positions = [i for i, t in enumerate(store.tasks()) if t.id in wanted]
    if len(positions) != len(wanted):
        logger.warning(
            "swipe_delete: %d of %d visible tasks no longer in store",
            len(wanted) - len(positions),
            len(wanted),
        )
    store.delete(positions)
