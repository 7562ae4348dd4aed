"""Data models for YouTrack sprint issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sprintsync.youtrack.exceptions import DecodeError


@dataclass(frozen=True)
class ScalarValue:
    """Custom field value sent as a bare string."""

    text: str


@dataclass(frozen=True)
class NamedValue:
    """Custom field value sent as an object with a ``name`` (enum, state, user)."""

    name: str


# None means the field has no usable value (null, number, list, nameless object).
FieldValue = ScalarValue | NamedValue | None


def decode_field_value(raw: Any) -> FieldValue:
    """Resolve a raw customFields[].value into a FieldValue."""
    if isinstance(raw, dict):
        name = raw.get("name")
        if isinstance(name, str):
            return NamedValue(name)
        return None
    if isinstance(raw, str):
        return ScalarValue(raw)
    return None


@dataclass(frozen=True)
class CustomField:
    """A named custom field on an issue."""

    name: str
    value: FieldValue = None

    @property
    def text(self) -> str | None:
        """The field value as plain text, or None when absent."""
        if isinstance(self.value, NamedValue):
            return self.value.name
        if isinstance(self.value, ScalarValue):
            return self.value.text
        return None


@dataclass
class Issue:
    """Represents an issue from a YouTrack sprint."""

    id_readable: str  # e.g. "ABC-1"
    summary: str
    description: str | None = None
    custom_fields: list[CustomField] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Issue:
        """Decode one element of the sprint issues response.

        Raises:
            DecodeError: If required keys are missing or have the wrong type.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"expected issue object, got {type(data).__name__}")

        id_readable = data.get("idReadable")
        if not isinstance(id_readable, str):
            raise DecodeError("issue is missing string field 'idReadable'")

        summary = data.get("summary")
        if not isinstance(summary, str):
            raise DecodeError(f"issue {id_readable} is missing string field 'summary'")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise DecodeError(f"issue {id_readable} has non-string 'description'")

        raw_fields = data.get("customFields") or []
        if not isinstance(raw_fields, list):
            raise DecodeError(f"issue {id_readable} has non-list 'customFields'")

        custom_fields = []
        for raw_field in raw_fields:
            if not isinstance(raw_field, dict) or not isinstance(raw_field.get("name"), str):
                raise DecodeError(f"issue {id_readable} has a custom field without a name")
            custom_fields.append(
                CustomField(
                    name=raw_field["name"],
                    value=decode_field_value(raw_field.get("value")),
                )
            )

        return cls(
            id_readable=id_readable,
            summary=summary,
            description=description,
            custom_fields=custom_fields,
        )
