"""Board URL parsing and YouTrack URL construction."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from sprintsync.youtrack.exceptions import InvalidInputError


def _parse_absolute(raw: str, what: str) -> httpx.URL:
    try:
        url = httpx.URL(raw.strip())
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidInputError(f"invalid {what}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidInputError(f"invalid {what}: expected an absolute http(s) URL, got {raw!r}")
    return url


def _with_trailing_slash(url: httpx.URL) -> httpx.URL:
    # URL.path reports "/" for an empty path, so always set it explicitly.
    path = url.path if url.path.endswith("/") else url.path + "/"
    return url.copy_with(path=path)


def normalize_base_url(base_url: str) -> str:
    """Validate a YouTrack base URL and make sure it ends with a slash.

    Query string and fragment are dropped, as parse_board_url does.

    Raises:
        InvalidInputError: If the URL is not an absolute http(s) URL.
    """
    url = _parse_absolute(base_url, "YouTrack base URL")
    return str(_with_trailing_slash(url.copy_with(query=None, fragment=None)))


def issue_url(base_url: str, issue_id: str) -> str:
    """Build the browser URL of an issue, e.g. ``{base}issue/ABC-1``."""
    url = _parse_absolute(normalize_base_url(base_url), "YouTrack base URL")
    try:
        return str(url.join(f"issue/{issue_id}"))
    except httpx.InvalidURL as e:
        raise InvalidInputError(f"failed to build issue URL for {issue_id}: {e}") from e


@dataclass(frozen=True)
class BoardLocation:
    """Where a sprint lives: YouTrack base URL plus agile board and sprint ids."""

    base_url: str
    agile_id: str
    sprint_id: str

    @classmethod
    def from_parts(cls, base_url: str, agile_id: str, sprint_id: str) -> BoardLocation:
        """Build a location from explicitly supplied parts.

        Raises:
            InvalidInputError: If the base URL is invalid or an id is blank.
        """
        if not agile_id.strip():
            raise InvalidInputError("missing agile id")
        if not sprint_id.strip():
            raise InvalidInputError("missing sprint id")
        return cls(
            base_url=normalize_base_url(base_url),
            agile_id=agile_id.strip(),
            sprint_id=sprint_id.strip(),
        )

    @property
    def sprint_issues_url(self) -> str:
        return f"{self.base_url}api/agiles/{self.agile_id}/sprints/{self.sprint_id}/issues"


def parse_board_url(board_url: str) -> BoardLocation:
    """Derive base URL, agile id and sprint id from a pasted board URL.

    ``https://host/youtrack/agiles/65-52/66-155467?x=1`` gives base
    ``https://host/youtrack/``, agile ``65-52`` and sprint ``66-155467``.

    Raises:
        InvalidInputError: If the URL is unparsable, has no ``agiles``
            segment, or lacks the agile or sprint id.
    """
    url = _parse_absolute(board_url, "YouTrack board URL")
    segments = url.path.lstrip("/").split("/")

    agiles_index = next(
        (i for i, segment in enumerate(segments) if segment.lower() == "agiles"),
        None,
    )
    if agiles_index is None:
        raise InvalidInputError("board URL must contain '/agiles/{agileId}/{sprintId}'")

    ids = segments[agiles_index + 1 : agiles_index + 3]
    if len(ids) < 1 or not ids[0]:
        raise InvalidInputError("missing agile id segment")
    if len(ids) < 2 or not ids[1]:
        raise InvalidInputError("missing sprint id segment")

    prefix = segments[:agiles_index]
    prefix_path = "/" + "".join(f"{segment}/" for segment in prefix if segment)
    base = url.copy_with(path=prefix_path, query=None, fragment=None)

    return BoardLocation(
        base_url=str(_with_trailing_slash(base)),
        agile_id=ids[0],
        sprint_id=ids[1],
    )
