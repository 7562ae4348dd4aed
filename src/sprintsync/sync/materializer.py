"""TaskMaterializer - Turns open issues into tasks, skipping ones already synced."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sprintsync.task_store import TaskStatus
from sprintsync.youtrack import issue_url

if TYPE_CHECKING:
    from sprintsync.sync.models import SyncSummary
    from sprintsync.task_store import TaskStore
    from sprintsync.youtrack import Issue

logger = logging.getLogger("sprintsync.sync")


def title_prefix(issue_id: str) -> str:
    """Dedup key carried at the start of every synced task title."""
    return f"[{issue_id}] "


def build_title(issue: Issue) -> str:
    return f"{title_prefix(issue.id_readable)}{issue.summary}"


def build_description(base_url: str, issue: Issue) -> str:
    """Link back to the issue, then the issue description if it is not blank."""
    description = f"YouTrack: {issue_url(base_url, issue.id_readable)}\n"
    if issue.description is not None and issue.description.strip():
        description += "\n" + issue.description
    return description


class TaskMaterializer:
    """Creates one Todo task per issue in a project, at most once per issue id."""

    def __init__(
        self,
        store: TaskStore,
        project_id: str,
        base_url: str,
        dry_run: bool = False,
    ) -> None:
        """Initialize the materializer.

        Args:
            store: Task store to look up and create tasks in.
            project_id: Project that receives the tasks.
            base_url: Normalized YouTrack base URL, used for issue links.
            dry_run: Record what would be created without writing.
        """
        self.store = store
        self.project_id = project_id
        self.base_url = base_url
        self.dry_run = dry_run

    def materialize(self, issue: Issue, summary: SyncSummary) -> bool:
        """Create a task for the issue unless one exists, updating summary.

        Returns:
            True if a task was (or would be) created, False if skipped.
        """
        prefix = title_prefix(issue.id_readable)
        existing = self.store.find_task_by_title_prefix(self.project_id, prefix)
        if existing is not None:
            logger.debug("Skipping %s: task %s already exists", issue.id_readable, existing.id)
            summary.skipped_existing += 1
            return False

        title = build_title(issue)
        description = build_description(self.base_url, issue)

        if self.dry_run:
            logger.info("Would create task: %s", title)
        else:
            task = self.store.create_task(
                project_id=self.project_id,
                title=title,
                description=description,
                status=TaskStatus.TODO,
            )
            logger.info("Created task %s: %s", task.id, title)

        summary.created += 1
        summary.created_titles.append(title)
        return True
