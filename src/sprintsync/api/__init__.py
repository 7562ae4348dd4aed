"""REST API for sprintsync."""

from sprintsync.api.app import app, create_app
from sprintsync.api.models import (
    APIResponse,
    OpenSyncRequest,
    SyncSummaryResponse,
)

__all__ = [
    "APIResponse",
    "OpenSyncRequest",
    "SyncSummaryResponse",
    "app",
    "create_app",
]
