"""Custom exceptions for Task Store."""


class TaskStoreError(Exception):
    """Base exception for Task Store errors."""


class ProjectNotFoundError(TaskStoreError):
    """Project with given ID does not exist."""
