"""Project and task read/create endpoints."""

from fastapi import APIRouter, status

from sprintsync.api.dependencies import TaskStoreDep
from sprintsync.api.models import (
    APIResponse,
    ProjectCreate,
    ProjectResponse,
    TaskResponse,
    project_to_response,
    task_to_response,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=APIResponse[list[ProjectResponse]])
def list_projects(store: TaskStoreDep) -> APIResponse[list[ProjectResponse]]:
    """List all projects."""
    projects = store.list_projects()
    return APIResponse(data=[project_to_response(p) for p in projects])


@router.post(
    "",
    response_model=APIResponse[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_project(project: ProjectCreate, store: TaskStoreDep) -> APIResponse[ProjectResponse]:
    """Create a new project."""
    created = store.create_project(name=project.name)
    return APIResponse(data=project_to_response(created))


@router.get("/{project_id}", response_model=APIResponse[ProjectResponse])
def get_project(project_id: str, store: TaskStoreDep) -> APIResponse[ProjectResponse]:
    """Get a project by ID."""
    project = store.get_project(project_id)
    return APIResponse(data=project_to_response(project))


@router.get("/{project_id}/tasks", response_model=APIResponse[list[TaskResponse]])
def list_tasks(project_id: str, store: TaskStoreDep) -> APIResponse[list[TaskResponse]]:
    """List the tasks of a project, oldest first."""
    tasks = store.list_tasks(project_id)
    return APIResponse(data=[task_to_response(t) for t in tasks])
