"""Integration tests for the REST API against a real SQLite file."""

import pytest
from fastapi.testclient import TestClient

from sprintsync.api.app import create_app
from sprintsync.api.dependencies import get_youtrack_client_factory
from sprintsync.task_store import TaskStore
from sprintsync.youtrack import YouTrackClient

TOKEN = "perm:cm9vdA==.YXBp.integration"


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "tasks.db")


@pytest.fixture
def youtrack(fake_youtrack, make_issue):
    return fake_youtrack(
        [
            make_issue("ABC-1", "Fix login", description="Steps"),
            make_issue("ABC-2", "Old bug", state="Fixed"),
            make_issue("ABC-3", "Add export"),
        ]
    )


@pytest.fixture
def client(db_path: str, youtrack):
    """Create a client for the full app; only the YouTrack transport is faked."""
    app = create_app(db_path)

    def override_get_youtrack_client_factory():
        return lambda token: YouTrackClient(token, transport=youtrack.transport)

    app.dependency_overrides[get_youtrack_client_factory] = override_get_youtrack_client_factory
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.integration
class TestOpenSyncFlow:
    """Create a project, sync it, then read the tasks back."""

    def test_full_flow(self, client: TestClient, db_path: str) -> None:
        created = client.post("/api/v1/projects", json={"name": "Sprint board"})
        assert created.status_code == 201
        project_id = created.json()["data"]["id"]

        response = client.post(
            "/api/v1/integrations/youtrack/open-sync",
            json={
                "project_id": project_id,
                "board_url": "https://yt.example.com/youtrack/agiles/65-52/66-155467",
                "youtrack_token": TOKEN,
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["created_titles"] == [
            "[ABC-1] Fix login",
            "[ABC-3] Add export",
        ]

        tasks = client.get(f"/api/v1/projects/{project_id}/tasks").json()["data"]
        assert [t["title"] for t in tasks] == ["[ABC-1] Fix login", "[ABC-3] Add export"]
        assert {t["status"] for t in tasks} == {"todo"}

        # Tasks are visible to another store opened on the same file
        other = TaskStore(db_path)
        try:
            assert other.find_task_by_title_prefix(project_id, "[ABC-3] ") is not None
        finally:
            other.close()

    def test_repeat_sync_reports_skips(self, client: TestClient) -> None:
        project_id = client.post("/api/v1/projects", json={"name": "Board"}).json()["data"]["id"]
        body = {
            "project_id": project_id,
            "youtrack_base_url": "https://yt.example.com/youtrack/",
            "agile_id": "65-52",
            "sprint_id": "66-155467",
            "youtrack_token": TOKEN,
        }

        first = client.post("/api/v1/integrations/youtrack/open-sync", json=body).json()["data"]
        second = client.post("/api/v1/integrations/youtrack/open-sync", json=body).json()["data"]

        assert first["created"] == 2
        assert second["created"] == 0
        assert second["skipped_existing"] == second["open_issues_total"] == 2
