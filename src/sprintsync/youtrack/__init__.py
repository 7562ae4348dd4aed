"""YouTrack integration - sprint issue fetching and board URL handling."""

from sprintsync.youtrack.client import FIELDS, PAGE_SIZE, YouTrackClient
from sprintsync.youtrack.exceptions import (
    DecodeError,
    InvalidInputError,
    UpstreamError,
    YouTrackError,
)
from sprintsync.youtrack.models import (
    CustomField,
    FieldValue,
    Issue,
    NamedValue,
    ScalarValue,
)
from sprintsync.youtrack.urls import (
    BoardLocation,
    issue_url,
    normalize_base_url,
    parse_board_url,
)

__all__ = [
    "FIELDS",
    "PAGE_SIZE",
    "BoardLocation",
    "CustomField",
    "DecodeError",
    "FieldValue",
    "InvalidInputError",
    "Issue",
    "NamedValue",
    "ScalarValue",
    "UpstreamError",
    "YouTrackClient",
    "YouTrackError",
    "issue_url",
    "normalize_base_url",
    "parse_board_url",
]
