"""Open/closed classification of sprint issues by a state custom field."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprintsync.youtrack import Issue


def state_value(issue: Issue, state_field: str) -> str | None:
    """Return the value of the first custom field named like state_field.

    Field names are matched case-insensitively. Returns None when the field
    is missing or carries no usable value.
    """
    wanted = state_field.casefold()
    for custom_field in issue.custom_fields:
        if custom_field.name.casefold() == wanted:
            return custom_field.text
    return None


def is_open(issue: Issue, state_field: str, open_value: str) -> bool:
    """Whether the issue's state field equals open_value, ignoring case."""
    value = state_value(issue, state_field)
    return value is not None and value.casefold() == open_value.casefold()
