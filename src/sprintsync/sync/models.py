"""Data models for the sync module."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SyncSummary:
    """Result of one sync run.

    Attributes:
        open_issues_total: Open issues found in the sprint.
        created: Tasks created, or that would be created in a dry run.
        skipped_existing: Open issues that already had a task.
        dry_run: Whether the store was left untouched.
        created_titles: Titles of created tasks, in tracker order.
    """

    open_issues_total: int = 0
    created: int = 0
    skipped_existing: int = 0
    dry_run: bool = False
    created_titles: list[str] = field(default_factory=list)
