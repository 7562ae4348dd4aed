"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Callable, Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from sprintsync.task_store import TaskStore
from sprintsync.youtrack import YouTrackClient

# Global TaskStore instance (initialized on app startup)
_task_store: TaskStore | None = None


def init_task_store(db_path: str = "sprintsync.db") -> TaskStore:
    """Initialize the global TaskStore instance."""
    global _task_store  # noqa: PLW0603
    _task_store = TaskStore(db_path)
    return _task_store


def close_task_store() -> None:
    """Close the global TaskStore instance."""
    global _task_store  # noqa: PLW0603
    if _task_store is not None:
        _task_store.close()
        _task_store = None


def get_task_store() -> Generator[TaskStore, None, None]:
    """Dependency that provides the TaskStore instance."""
    if _task_store is None:
        raise RuntimeError("TaskStore not initialized. Call init_task_store() first.")
    yield _task_store


# Type alias for dependency injection
TaskStoreDep = Annotated[TaskStore, Depends(get_task_store)]

YouTrackClientFactory = Callable[[str], YouTrackClient]


def get_youtrack_client_factory() -> YouTrackClientFactory:
    """Dependency that builds a YouTrack client from a request's token."""
    return YouTrackClient


YouTrackClientFactoryDep = Annotated[YouTrackClientFactory, Depends(get_youtrack_client_factory)]
