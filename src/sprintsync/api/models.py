"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Project models


class ProjectCreate(BaseModel):
    """Request model for creating a project."""

    name: str = Field(..., min_length=1, max_length=255)


class ProjectResponse(BaseModel):
    """Response model for a project."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime
    updated_at: datetime


def project_to_response(project: Any) -> ProjectResponse:
    """Convert a Project model to ProjectResponse."""
    return ProjectResponse.model_validate(project)


# Task models


class TaskResponse(BaseModel):
    """Response model for a task."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    title: str
    description: str | None
    status: str
    parent_workspace_id: str | None
    shared_task_id: str | None
    created_at: datetime
    updated_at: datetime


def task_to_response(task: Any) -> TaskResponse:
    """Convert a Task model to TaskResponse."""
    return TaskResponse.model_validate(task)


# YouTrack open-sync models


class OpenSyncRequest(BaseModel):
    """Request model for syncing open sprint issues.

    Either board_url or all of youtrack_base_url, agile_id and sprint_id
    must be given; board_url wins when both are present.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str = Field(..., min_length=1)
    board_url: str | None = None
    youtrack_base_url: str | None = None
    agile_id: str | None = None
    sprint_id: str | None = None
    youtrack_token: str = Field(..., min_length=1, repr=False)
    state_field: str = Field(default="State", min_length=1)
    open_value: str = Field(default="Open", min_length=1)
    dry_run: bool = False


class SyncSummaryResponse(BaseModel):
    """Response model for a sync summary."""

    model_config = ConfigDict(from_attributes=True)

    open_issues_total: int
    created: int
    skipped_existing: int
    dry_run: bool
    created_titles: list[str]


def summary_to_response(summary: Any) -> SyncSummaryResponse:
    """Convert a SyncSummary to SyncSummaryResponse."""
    return SyncSummaryResponse.model_validate(summary)
