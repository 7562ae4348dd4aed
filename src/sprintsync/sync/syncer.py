"""OpenIssueSync - Copies open sprint issues into the task store as Todo tasks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sprintsync.sync.classifier import is_open
from sprintsync.sync.materializer import TaskMaterializer
from sprintsync.sync.models import SyncSummary
from sprintsync.youtrack import (
    BoardLocation,
    InvalidInputError,
    YouTrackClient,
    parse_board_url,
)

if TYPE_CHECKING:
    from sprintsync.task_store import TaskStore

logger = logging.getLogger("sprintsync.sync")

DEFAULT_STATE_FIELD = "State"
DEFAULT_OPEN_VALUE = "Open"


def resolve_board(
    board_url: str | None = None,
    base_url: str | None = None,
    agile_id: str | None = None,
    sprint_id: str | None = None,
) -> BoardLocation:
    """Pick the board location from a board URL or from explicit parts.

    A non-blank board URL wins; otherwise all three parts are required.

    Raises:
        InvalidInputError: If the board URL is malformed or a part is missing.
    """
    if board_url and board_url.strip():
        return parse_board_url(board_url)
    if not base_url or not base_url.strip():
        raise InvalidInputError("missing youtrack_base_url")
    if not agile_id or not agile_id.strip():
        raise InvalidInputError("missing agile_id")
    if not sprint_id or not sprint_id.strip():
        raise InvalidInputError("missing sprint_id")
    return BoardLocation.from_parts(base_url, agile_id, sprint_id)


class OpenIssueSync:
    """Fetches a sprint, keeps the open issues and materializes them as tasks.

    Knows nothing about who calls it; the CLI and the HTTP route both go
    through sync_open_sprint_issues().
    """

    def __init__(self, store: TaskStore, client: YouTrackClient) -> None:
        """Initialize the sync.

        Args:
            store: Task store that receives the tasks.
            client: YouTrack client used to fetch sprint issues.
        """
        self.store = store
        self.client = client

    def sync(
        self,
        project_id: str,
        board: BoardLocation,
        state_field: str = DEFAULT_STATE_FIELD,
        open_value: str = DEFAULT_OPEN_VALUE,
        dry_run: bool = False,
    ) -> SyncSummary:
        """Run one sync.

        Args:
            project_id: Project to create tasks in.
            board: Sprint location; the base URL is normalized before use.
            state_field: Custom field that holds the issue state.
            open_value: State value that counts as open.
            dry_run: Report what would be created without writing. The project
                is still looked up, so a dry run against an unknown project
                fails too.

        Returns:
            SyncSummary with counts and created titles in tracker order.

        Raises:
            ProjectNotFoundError: If the project does not exist, before any
                YouTrack request is made.
        """
        board = BoardLocation.from_parts(board.base_url, board.agile_id, board.sprint_id)

        # Verify project exists
        self.store.get_project(project_id)

        logger.info(
            "Syncing sprint %s of board %s into project %s (dry_run=%s)",
            board.sprint_id,
            board.agile_id,
            project_id,
            dry_run,
        )

        issues = self.client.fetch_sprint_issues(board.base_url, board.agile_id, board.sprint_id)
        open_issues = [issue for issue in issues if is_open(issue, state_field, open_value)]
        logger.info(
            "Found %d open issue(s) out of %d (%s = %s)",
            len(open_issues),
            len(issues),
            state_field,
            open_value,
        )

        summary = SyncSummary(open_issues_total=len(open_issues), dry_run=dry_run)
        materializer = TaskMaterializer(
            store=self.store,
            project_id=project_id,
            base_url=board.base_url,
            dry_run=dry_run,
        )
        for issue in open_issues:
            materializer.materialize(issue, summary)

        logger.info(
            "Sync complete: created %d, skipped %d existing",
            summary.created,
            summary.skipped_existing,
        )
        return summary


def sync_open_sprint_issues(
    store: TaskStore,
    project_id: str,
    board: BoardLocation,
    token: str,
    state_field: str = DEFAULT_STATE_FIELD,
    open_value: str = DEFAULT_OPEN_VALUE,
    dry_run: bool = False,
    client: YouTrackClient | None = None,
) -> SyncSummary:
    """Sync open sprint issues into a project as Todo tasks.

    Args:
        store: Task store that receives the tasks.
        project_id: Project to create tasks in.
        board: Sprint location.
        token: YouTrack permanent token, used when no client is given.
        state_field: Custom field that holds the issue state.
        open_value: State value that counts as open.
        dry_run: Report what would be created without writing.
        client: Pre-built client; when omitted one is created and closed here.

    Returns:
        SyncSummary of the run.

    Raises:
        InvalidInputError: If the board location is malformed.
        UpstreamError: If YouTrack cannot be fetched.
        DecodeError: If YouTrack answers with an unexpected body.
        TaskStoreError: If a task lookup or creation fails.
    """
    if client is not None:
        return OpenIssueSync(store, client).sync(
            project_id, board, state_field, open_value, dry_run
        )

    with YouTrackClient(token) as owned_client:
        return OpenIssueSync(store, owned_client).sync(
            project_id, board, state_field, open_value, dry_run
        )
