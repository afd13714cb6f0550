# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from ..core.ports import ChangeListener
from .errors import IndexOutOfRange, InvalidArgument, TaskNotFound
from .task_models import Priority, Task, TaskFields, TaskStatus, new_task_id

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    The collection keeps insertion order; only deletion removes entries.
    Reads return copies, so callers never hold a reference to stored tasks.

    Unknown ids passed to cycle_status/edit/delete_by_id are ignored unless
    strict_lookup is set, in which case TaskNotFound is raised.

    Thread-safety:
    - none; guard the store externally if it is shared between threads
    """

    def __init__(self, *, require_title: bool = True, strict_lookup: bool = False) -> None:
        self._tasks: list[Task] = []
        self._listeners: list[ChangeListener] = []
        self._require_title = require_title
        self._strict_lookup = strict_lookup
        logger.debug(
            "TaskStore ready require_title=%s strict_lookup=%s", require_title, strict_lookup
        )

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _lookup(self, task_id: str, op: str) -> int | None:
        idx = self._index_of(task_id)
        if idx is None:
            if self._strict_lookup:
                raise TaskNotFound(task_id)
            logger.debug("%s ignored: unknown task id=%s", op, task_id)
        return idx

    def _check_title(self, title: str) -> None:
        if self._require_title and not title.strip():
            raise InvalidArgument("title is required")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("TaskStore change listener failed: %r", listener)

    # ---- change notification ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Register a callback invoked after every successful mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else replace(self._tasks[idx])

    def add(
        self,
        title: str,
        description: str = "",
        priority: Priority | str = Priority.MEDIUM,
        status: TaskStatus | str = TaskStatus.BACKLOG,
    ) -> Task:
        self._check_title(title)
        task = Task(
            id=new_task_id(),
            title=title,
            description=description,
            priority=Priority.from_raw(priority),
            status=TaskStatus.from_raw(status),
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s priority=%s status=%s", task.id, task.priority, task.status
        )
        self._notify()
        return replace(task)

    def cycle_status(self, task_id: str) -> None:
        idx = self._lookup(task_id, "cycle_status")
        if idx is None:
            return
        task = self._tasks[idx]
        old = task.status
        task.status = old.next()
        logger.debug("Task status id=%s %s -> %s", task_id, old, task.status)
        self._notify()

    def edit(self, task_id: str, updated: TaskFields) -> None:
        self._check_title(updated.title)
        priority = Priority.from_raw(updated.priority)
        status = TaskStatus.from_raw(updated.status)

        idx = self._lookup(task_id, "edit")
        if idx is None:
            return
        task = self._tasks[idx]
        task.title = updated.title
        task.description = updated.description
        task.priority = priority
        task.status = status
        logger.debug("Task edited id=%s", task_id)
        self._notify()

    def delete(self, indices: Iterable[int]) -> None:
        """
        Remove the tasks at the given 0-based positions.

        All positions are checked before anything is removed, so a bad
        position leaves the collection untouched.
        """
        positions = set(indices)
        n = len(self._tasks)
        bad = sorted(i for i in positions if not 0 <= i < n)
        if bad:
            raise IndexOutOfRange(f"positions {bad} out of range for {n} tasks")
        if not positions:
            return

        self._tasks = [t for i, t in enumerate(self._tasks) if i not in positions]
        logger.debug("Tasks deleted positions=%s remaining=%d", sorted(positions), len(self._tasks))
        self._notify()

    def delete_by_id(self, task_id: str) -> None:
        idx = self._lookup(task_id, "delete_by_id")
        if idx is None:
            return
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        self._notify()

    def search(self, query: str) -> list[Task]:
        """
        Tasks whose title contains query (case-insensitive), in collection order.

        An empty query returns the whole collection.
        """
        if not query:
            return self.tasks()
        needle = query.casefold()
        return [replace(t) for t in self._tasks if needle in t.title.casefold()]
