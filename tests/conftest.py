"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from sprintsync.task_store import TaskStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class FakeYouTrack:
    """In-process stand-in for the sprint issues endpoint.

    Serves ``issues`` in $skip/$top slices and records every request.
    """

    def __init__(self, issues: list[dict[str, Any]], status_code: int = 200) -> None:
        self.issues = issues
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="YouTrack is unhappy")
        skip = int(request.url.params["$skip"])
        top = int(request.url.params["$top"])
        return httpx.Response(200, json=self.issues[skip : skip + top])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def _make_issue(
    id_readable: str,
    summary: str = "Some work",
    description: str | None = None,
    state: str | None = "Open",
    state_field: str = "State",
) -> dict[str, Any]:
    custom_fields: list[dict[str, Any]] = [
        {"name": "Priority", "value": {"name": "Normal"}},
    ]
    if state is not None:
        custom_fields.append({"name": state_field, "value": {"name": state}})
    return {
        "idReadable": id_readable,
        "summary": summary,
        "description": description,
        "customFields": custom_fields,
    }


@pytest.fixture
def make_issue() -> Callable[..., dict[str, Any]]:
    """Factory for issue JSON objects as YouTrack returns them."""
    return _make_issue


@pytest.fixture
def fake_youtrack() -> Callable[..., FakeYouTrack]:
    """Factory for FakeYouTrack servers."""
    return FakeYouTrack


@pytest.fixture
def store():
    """Create an in-memory TaskStore."""
    s = TaskStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def project_id(store: TaskStore) -> str:
    """ID of a freshly created project."""
    return store.create_project(name="Sprint board").id


@pytest.fixture(autouse=True)
def reset_sprintsync_logger():
    """Drop handlers and level left behind by setup_logging."""
    yield
    logger = logging.getLogger("sprintsync")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
