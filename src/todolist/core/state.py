# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Per-session application state.

    Built once by bootstrap.create_initial_state() and passed explicitly to
    whatever needs the store.
    """

    # Settings or any object with the same attributes (tests use SimpleNamespace).
    settings: object

    task_store: TaskStore
    search_text: str = ""

    def visible_tasks(self) -> list[Task]:
        """Tasks the list view shows for the current search text."""
        return self.task_store.search(self.search_text)
