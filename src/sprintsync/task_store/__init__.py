"""Task Store - Persistent storage for projects and their tasks."""

from sprintsync.task_store.exceptions import (
    ProjectNotFoundError,
    TaskStoreError,
)
from sprintsync.task_store.models import (
    Project,
    Task,
    TaskStatus,
)
from sprintsync.task_store.store import TaskStore

__all__ = [
    "Project",
    "ProjectNotFoundError",
    "Task",
    "TaskStatus",
    "TaskStore",
    "TaskStoreError",
]
