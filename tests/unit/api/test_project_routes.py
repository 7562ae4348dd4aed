"""Unit tests for project and task routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sprintsync.api.app import create_app
from sprintsync.api.dependencies import get_task_store
from sprintsync.task_store import TaskStore


@pytest.fixture
def app(store: TaskStore):
    """Create a test FastAPI app bound to the in-memory store."""
    app = create_app(db_path=":memory:")

    def override_get_task_store():
        yield store

    app.dependency_overrides[get_task_store] = override_get_task_store
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.unit
class TestListProjects:
    """Tests for GET /projects."""

    def test_list_projects_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/projects")

        assert response.status_code == 200
        data = response.json()
        assert data["data"] == []
        assert data["error"] is None

    def test_list_projects_returns_all(self, client: TestClient, store: TaskStore) -> None:
        store.create_project(name="Project B")
        store.create_project(name="Project A")

        response = client.get("/api/v1/projects")

        assert response.status_code == 200
        # Projects are ordered by name
        assert [p["name"] for p in response.json()["data"]] == ["Project A", "Project B"]


@pytest.mark.unit
class TestCreateProject:
    """Tests for POST /projects."""

    def test_create_project_success(self, client: TestClient, store: TaskStore) -> None:
        """201 with created project."""
        response = client.post("/api/v1/projects", json={"name": "Sprint board"})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Sprint board"
        assert store.get_project(data["id"]).name == "Sprint board"

    def test_create_project_empty_name(self, client: TestClient) -> None:
        """422 for an empty name."""
        response = client.post("/api/v1/projects", json={"name": ""})

        assert response.status_code == 422


@pytest.mark.unit
class TestGetProject:
    """Tests for GET /projects/{project_id}."""

    def test_get_project(self, client: TestClient, project_id: str) -> None:
        response = client.get(f"/api/v1/projects/{project_id}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == project_id

    def test_get_project_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/projects/missing")

        assert response.status_code == 404
        data = response.json()
        assert data["data"] is None
        assert "missing" in data["error"]


@pytest.mark.unit
class TestListTasks:
    """Tests for GET /projects/{project_id}/tasks."""

    def test_list_tasks(self, client: TestClient, store: TaskStore, project_id: str) -> None:
        store.create_task(project_id=project_id, title="[ABC-1] One", description="d")
        store.create_task(project_id=project_id, title="[ABC-2] Two")

        response = client.get(f"/api/v1/projects/{project_id}/tasks")

        assert response.status_code == 200
        tasks = response.json()["data"]
        assert [t["title"] for t in tasks] == ["[ABC-1] One", "[ABC-2] Two"]
        assert tasks[0]["status"] == "todo"
        assert tasks[0]["description"] == "d"
        assert tasks[1]["parent_workspace_id"] is None
        assert tasks[1]["shared_task_id"] is None

    def test_list_tasks_unknown_project(self, client: TestClient) -> None:
        response = client.get("/api/v1/projects/missing/tasks")

        assert response.status_code == 404
