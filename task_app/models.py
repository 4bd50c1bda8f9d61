"""
Data model for the task service.

This module defines the Task record, its JSON representation and the
demo records the store is seeded with at startup.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

from .errors import ParseError

FIELD_NAMES = ("id", "description", "note", "applications")

# json.loads leaves unpaired \uXXXX surrogate escapes as-is; they cannot be
# encoded back to UTF-8.
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _field_for(key: str) -> str | None:
    """Match a payload key to a field name, ignoring case."""
    if key in FIELD_NAMES:
        return key
    folded = key.casefold()
    for name in FIELD_NAMES:
        if name == folded:
            return name
    return None


def _clean_text(value: str) -> str:
    """Replace lone surrogates (from escapes like "\\ud800") with U+FFFD."""
    return LONE_SURROGATE.sub("\ufffd", value)


def _reject_constant(name: str) -> Any:
    raise ParseError(f"invalid JSON value {name}")


@dataclass
class Task:
    """
    Task record managed by the service.

    Attributes:
        id: Caller-supplied identifier, unique within the store.
        description: Free-form description of the task.
        note: Free-form note.
        applications: Names of the applications the task involves, in
            display order.
    """

    id: str = ""
    description: str = ""
    note: str = ""
    applications: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> Task:
        """
        Build a task from a decoded JSON payload.

        Keys match field names case-insensitively, later keys overriding
        earlier ones. Absent or null fields keep their empty value, null
        entries in ``applications`` become empty strings, and unknown
        keys are ignored. A null payload yields an empty task. Lone
        surrogates in any string are replaced with U+FFFD.

        Raises:
            ParseError: If the payload is not an object or a field has
                the wrong type.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ParseError(
                f"task payload must be a JSON object, not {type(data).__name__}"
            )

        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _field_for(key)
            if name is None or value is None:
                continue
            if name == "applications":
                if not isinstance(value, list) or not all(
                    item is None or isinstance(item, str) for item in value
                ):
                    raise ParseError("field 'applications' must be a list of strings")
                values[name] = [_clean_text(item or "") for item in value]
            else:
                if not isinstance(value, str):
                    raise ParseError(f"field '{name}' must be a string")
                values[name] = _clean_text(value)

        return cls(**values)

    @classmethod
    def from_json(cls, raw: bytes | str) -> Task:
        """
        Decode a request body into a task.

        Raises:
            ParseError: If the body is not valid JSON (NaN and Infinity
                included) or not a task payload.
        """
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ParseError(str(exc)) from exc
        return cls.from_payload(data)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to its JSON representation.

        Returns:
            Dictionary with id, description, note and applications keys.
        """
        return {
            "id": self.id,
            "description": self.description,
            "note": self.note,
            "applications": list(self.applications),
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.description}>"


def seed_tasks() -> list[Task]:
    """Return fresh copies of the two demo tasks, ids "1" and "2"."""
    return [
        Task(
            id="1",
            description="Сделать финальное задание темы REST API",
            note="Если сегодня сделаю, то завтра будет свободный день. Ура!",
            applications=["VS Code", "Terminal", "git"],
        ),
        Task(
            id="2",
            description="Протестировать финальное задание с помощью Postmen",
            note=(
                "Лучше это делать в процессе разработки, каждый раз, "
                "когда запускаешь сервер и проверяешь хендлер"
            ),
            applications=["VS Code", "Terminal", "git", "Postman"],
        ),
    ]
