"""
In-memory task list.

Components:
- tasks/task_models.py: data structures (Task, TaskFields, Priority, TaskStatus)
- tasks/task_store.py: ordered in-memory store + change notification
- tasks/task_api.py: helpers mapping form values and gestures to store calls
- bootstrap.py: builds the per-session AppState
"""

from .tasks.errors import IndexOutOfRange, InvalidArgument, TaskNotFound, TaskStoreError
from .tasks.task_models import Priority, Task, TaskFields, TaskStatus
from .tasks.task_store import TaskStore

__all__ = [
    "IndexOutOfRange",
    "InvalidArgument",
    "Priority",
    "Task",
    "TaskFields",
    "TaskNotFound",
    "TaskStatus",
    "TaskStore",
    "TaskStoreError",
]
