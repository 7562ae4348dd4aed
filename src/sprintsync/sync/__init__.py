"""Sync - Materializes open YouTrack sprint issues as Todo tasks."""

from sprintsync.sync.classifier import is_open, state_value
from sprintsync.sync.materializer import (
    TaskMaterializer,
    build_description,
    build_title,
    title_prefix,
)
from sprintsync.sync.models import SyncSummary
from sprintsync.sync.syncer import (
    DEFAULT_OPEN_VALUE,
    DEFAULT_STATE_FIELD,
    OpenIssueSync,
    resolve_board,
    sync_open_sprint_issues,
)

__all__ = [
    "DEFAULT_OPEN_VALUE",
    "DEFAULT_STATE_FIELD",
    "OpenIssueSync",
    "SyncSummary",
    "TaskMaterializer",
    "build_description",
    "build_title",
    "is_open",
    "resolve_board",
    "state_value",
    "sync_open_sprint_issues",
    "title_prefix",
]
