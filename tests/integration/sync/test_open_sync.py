"""Integration tests for syncing a sprint into a real task store."""

from unittest.mock import patch

import pytest

from sprintsync.sync import resolve_board, sync_open_sprint_issues
from sprintsync.task_store import TaskStatus, TaskStore, TaskStoreError
from sprintsync.youtrack import PAGE_SIZE, DecodeError, UpstreamError, YouTrackClient

TOKEN = "perm:cm9vdA==.aW50.sync"


@pytest.fixture
def board():
    return resolve_board(board_url="https://yt.example.com/youtrack/agiles/65-52/66-155467")


def _sync(store: TaskStore, project_id: str, board, youtrack, **kwargs):
    with YouTrackClient(TOKEN, transport=youtrack.transport) as client:
        return sync_open_sprint_issues(store, project_id, board, TOKEN, client=client, **kwargs)


@pytest.mark.integration
class TestOpenSync:
    """Sync against a fake YouTrack and an in-memory store."""

    def test_open_issue_becomes_todo_task(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack(
            [
                make_issue("ABC-1", "Fix bug", description="Details here"),
                make_issue("ABC-2", "Done already", state="Fixed"),
            ]
        )

        summary = _sync(store, project_id, board, youtrack)

        assert summary.open_issues_total == 1
        assert summary.created == 1
        assert summary.created_titles == ["[ABC-1] Fix bug"]
        [task] = store.list_tasks(project_id)
        assert task.title == "[ABC-1] Fix bug"
        assert task.task_status == TaskStatus.TODO
        assert task.description == (
            "YouTrack: https://yt.example.com/youtrack/issue/ABC-1\n\nDetails here"
        )

    def test_blank_description_keeps_only_link(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue("ABC-1", description="   ")])

        _sync(store, project_id, board, youtrack)

        [task] = store.list_tasks(project_id)
        assert task.description == "YouTrack: https://yt.example.com/youtrack/issue/ABC-1\n"

    def test_second_run_is_idempotent(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue(f"ABC-{n}") for n in range(1, 6)])
        _sync(store, project_id, board, youtrack)

        summary = _sync(store, project_id, board, youtrack)

        assert summary.created == 0
        assert summary.skipped_existing == summary.open_issues_total == 5
        assert len(store.list_tasks(project_id)) == 5

    def test_renamed_issue_is_not_duplicated(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        """Dedup is by issue id, so a new summary does not create a second task."""
        _sync(store, project_id, board, fake_youtrack([make_issue("ABC-1", "Old name")]))

        summary = _sync(store, project_id, board, fake_youtrack([make_issue("ABC-1", "New name")]))

        assert summary.skipped_existing == 1
        assert [t.title for t in store.list_tasks(project_id)] == ["[ABC-1] Old name"]

    def test_dry_run_leaves_store_untouched(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue("ABC-1"), make_issue("ABC-2")])

        summary = _sync(store, project_id, board, youtrack, dry_run=True)

        assert summary.created == 2
        assert summary.dry_run is True
        assert store.list_tasks(project_id) == []

    def test_paginates_across_full_pages(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        issues = [make_issue(f"ABC-{n}") for n in range(1, 2 * PAGE_SIZE + 38)]
        youtrack = fake_youtrack(issues)

        summary = _sync(store, project_id, board, youtrack)

        assert [r.url.params["$skip"] for r in youtrack.requests] == ["0", "100", "200"]
        assert summary.created == 2 * PAGE_SIZE + 37

    def test_issues_without_state_field_are_not_open(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue("ABC-1", state=None), make_issue("ABC-2")])

        summary = _sync(store, project_id, board, youtrack)

        assert summary.created_titles == ["[ABC-2] Some work"]


@pytest.mark.integration
class TestOpenSyncFailures:
    """Failures abort the run and keep what was already written."""

    def test_upstream_error_writes_nothing(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue("ABC-1")], status_code=503)

        with pytest.raises(UpstreamError, match="503"):
            _sync(store, project_id, board, youtrack)

        assert store.list_tasks(project_id) == []

    def test_malformed_issue_is_decode_error(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        broken = make_issue("ABC-2")
        del broken["summary"]
        youtrack = fake_youtrack([make_issue("ABC-1"), broken])

        with pytest.raises(DecodeError, match="summary"):
            _sync(store, project_id, board, youtrack)

        assert store.list_tasks(project_id) == []

    def test_store_failure_keeps_earlier_creations(
        self, store: TaskStore, project_id: str, board, fake_youtrack, make_issue
    ) -> None:
        youtrack = fake_youtrack([make_issue("ABC-1"), make_issue("ABC-2"), make_issue("ABC-3")])
        real_create = store.create_task

        def create_then_fail(**kwargs):
            if kwargs["title"].startswith("[ABC-2] "):
                raise TaskStoreError("failed to create task")
            return real_create(**kwargs)

        with (
            patch.object(store, "create_task", side_effect=create_then_fail),
            pytest.raises(TaskStoreError),
        ):
            _sync(store, project_id, board, youtrack)

        assert [t.title for t in store.list_tasks(project_id)] == ["[ABC-1] Some work"]
