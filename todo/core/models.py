"""
FILE: todo/core/models.py
PURPOSE: Domain model for a single task
EXPORTS:
  - Task (dataclass)
  - is_valid_text(value) -> bool
DEPENDENCIES:
  - dataclasses (stdlib)
  - typing (stdlib)
NOTES:
  - from_dict() validates one element of the persisted JSON array
  - to_dict() yields exactly the persisted fields (id, description, done)
  - is_valid_text() rejects strings that cannot be written as UTF-8
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class Task:
    """A to-do item with a sequential id and a done flag."""

    id: int
    description: str
    done: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """
        Convert a decoded JSON object to a Task.

        Raises:
            ValueError: If the object is missing a field or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        for field_name in ("id", "description", "done"):
            if field_name not in data:
                raise ValueError(f"missing field '{field_name}'")

        task_id = data["id"]
        # bool is a subclass of int
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"field 'id' must be an integer, got {task_id!r}")
        if task_id < 1:
            raise ValueError(f"field 'id' must be positive, got {task_id}")
        if not isinstance(data["description"], str):
            raise ValueError(f"task {task_id}: field 'description' must be a string")
        if not is_valid_text(data["description"]):
            raise ValueError(f"task {task_id}: field 'description' is not valid UTF-8 text")
        if not isinstance(data["done"], bool):
            raise ValueError(f"task {task_id}: field 'done' must be a boolean")

        return cls(
            id=task_id,
            description=data["description"],
            done=data["done"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def is_valid_text(value: str) -> bool:
    """False for strings holding lone surrogates (undecodable argv bytes, "\\ud800" escapes)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
