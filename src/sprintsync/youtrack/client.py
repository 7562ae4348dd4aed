"""YouTrackClient - Fetches agile sprint issues from the YouTrack REST API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from sprintsync.logging import sanitize_for_log, truncate_output
from sprintsync.youtrack.exceptions import DecodeError, UpstreamError
from sprintsync.youtrack.models import Issue
from sprintsync.youtrack.urls import BoardLocation

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

logger = logging.getLogger("sprintsync.youtrack")

PAGE_SIZE = 100
FIELDS = "idReadable,summary,description,customFields(name,value(name))"


class YouTrackClient:
    """Read-only client for the sprint issues endpoint.

    Authenticates every request with a permanent token sent as a bearer
    header. The token is kept out of logs and error messages.
    """

    def __init__(
        self,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: YouTrack permanent token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (for testing)
        """
        self._token = token
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None
        self.requests_made = 0

    def __repr__(self) -> str:
        return f"<YouTrackClient(timeout={self.timeout!r})>"

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> YouTrackClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _redact(self, text: str) -> str:
        """Mask the token, raw or escaped as in a bytes repr, then known secret patterns."""
        if self._token:
            forms = {
                self._token,
                self._token.encode("unicode_escape").decode("ascii"),
                repr(self._token.encode("utf-8"))[2:-1],
            }
            for form in sorted(forms, key=len, reverse=True):
                text = text.replace(form, "[REDACTED]")
        return sanitize_for_log(text)

    def _get_page(self, board: BoardLocation, skip: int) -> list[Issue]:
        params = {"$skip": str(skip), "$top": str(PAGE_SIZE), "fields": FIELDS}
        where = f"sprint {board.sprint_id} of board {board.agile_id} at offset {skip}"

        try:
            response = self.client.get(board.sprint_issues_url, params=params)
            self.requests_made += 1
        except httpx.HTTPError as e:
            raise UpstreamError(
                f"YouTrack request failed for {where}: {self._redact(str(e))}"
            ) from e

        if not response.is_success:
            body = truncate_output(self._redact(response.text))
            raise UpstreamError(
                f"YouTrack returned {response.status_code} for {where}: {body}"
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode YouTrack issues JSON for {where}: {e}") from e

        if not isinstance(payload, list):
            raise DecodeError(
                f"expected a JSON array of issues for {where}, got {type(payload).__name__}"
            )

        try:
            return [Issue.from_json(item) for item in payload]
        except DecodeError as e:
            raise DecodeError(f"failed to decode YouTrack issues JSON for {where}: {e}") from e

    def iter_sprint_pages(self, board: BoardLocation) -> Iterator[list[Issue]]:
        """Yield pages of sprint issues until a short page is returned.

        A page holding exactly PAGE_SIZE issues is always followed by one more
        request, which may come back empty.

        Args:
            board: Normalized board location

        Yields:
            Each decoded page, in order
        """
        skip = 0
        while True:
            page = self._get_page(board, skip)
            logger.debug(
                "Fetched %d issue(s) from sprint %s at offset %d",
                len(page),
                board.sprint_id,
                skip,
            )
            yield page
            if len(page) < PAGE_SIZE:
                return
            skip += PAGE_SIZE

    def fetch_sprint_issues(self, base_url: str, agile_id: str, sprint_id: str) -> list[Issue]:
        """Fetch every issue of a sprint.

        Args:
            base_url: YouTrack base URL (a trailing slash is added if missing)
            agile_id: Agile board id, e.g. "65-52"
            sprint_id: Sprint id, e.g. "66-155467"

        Returns:
            All issues in the order YouTrack returned them

        Raises:
            InvalidInputError: If the location is malformed
            UpstreamError: On transport failure or non-success status
            DecodeError: If a response body has an unexpected shape
        """
        board = BoardLocation.from_parts(base_url, agile_id, sprint_id)
        requests_before = self.requests_made
        issues: list[Issue] = []
        for page in self.iter_sprint_pages(board):
            issues.extend(page)

        logger.info(
            "Fetched %d issue(s) from sprint %s in %d request(s)",
            len(issues),
            sprint_id,
            self.requests_made - requests_before,
        )
        return issues
