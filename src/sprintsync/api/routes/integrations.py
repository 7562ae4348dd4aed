"""YouTrack open-issue sync endpoint."""

from fastapi import APIRouter

from sprintsync.api.dependencies import TaskStoreDep, YouTrackClientFactoryDep
from sprintsync.api.models import (
    APIResponse,
    OpenSyncRequest,
    SyncSummaryResponse,
    summary_to_response,
)
from sprintsync.sync import resolve_board, sync_open_sprint_issues

router = APIRouter(prefix="/integrations", tags=["integrations"])


@router.post("/youtrack/open-sync", response_model=APIResponse[SyncSummaryResponse])
def sync_youtrack_open(
    payload: OpenSyncRequest,
    store: TaskStoreDep,
    client_factory: YouTrackClientFactoryDep,
) -> APIResponse[SyncSummaryResponse]:
    """Create Todo tasks for the open issues of a YouTrack sprint."""
    board = resolve_board(
        board_url=payload.board_url,
        base_url=payload.youtrack_base_url,
        agile_id=payload.agile_id,
        sprint_id=payload.sprint_id,
    )

    with client_factory(payload.youtrack_token) as client:
        summary = sync_open_sprint_issues(
            store,
            payload.project_id,
            board,
            token=payload.youtrack_token,
            state_field=payload.state_field,
            open_value=payload.open_value,
            dry_run=payload.dry_run,
            client=client,
        )
    return APIResponse(data=summary_to_response(summary))
