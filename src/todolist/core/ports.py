# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task helpers.

The helpers depend on Protocols instead of the concrete TaskStore.
This keeps the store swappable and makes testing easier.
"""

from collections.abc import Callable, Iterable
from typing import Any, Protocol

ChangeListener = Callable[[Any], None]
# Called with the store after every successful mutation.


class TaskRepo(Protocol):
    # Queries
    def tasks(self) -> list[Any]: ...
    def get(self, task_id: str) -> Any | None: ...
    def search(self, query: str) -> list[Any]: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def add(
            self,
            title: str,
            description: str = "",
            priority: Any = "medium",  # Priority (kept as Any to avoid import coupling)
            status: Any = "backlog",  # TaskStatus
    ) -> Any: ...
    def cycle_status(self, task_id: str) -> None: ...
    def edit(self, task_id: str, updated: Any) -> None: ...
    def delete(self, indices: Iterable[int]) -> None: ...
    def delete_by_id(self, task_id: str) -> None: ...

    # Change notification
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...
