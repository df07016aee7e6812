"""
FILE: todo/formatting.py
PURPOSE: Text formatting for CLI output
EXPORTS:
  - TaskFormatter: status lines and task list rendering
  - parse_task_id: Validate a positive integer task ID
DEPENDENCIES:
  - json (for --json output)
  - todo.core.models (Task)
  - todo.core.exceptions (InvalidInputError)
NOTES:
  - Line formats are fixed; scripts may parse them
"""

import json
from typing import Iterable, List

from .core.constants import MARK_DONE, MARK_TODO
from .core.exceptions import InvalidInputError
from .core.models import Task

EMPTY_MESSAGE = "No tasks found."


class TaskFormatter:
    """Centralized task display formatting."""

    @staticmethod
    def task_line(task: Task) -> str:
        mark = MARK_DONE if task.done else MARK_TODO
        return f"{mark} {task.id}: {task.description}"

    @staticmethod
    def to_lines(tasks: Iterable[Task]) -> List[str]:
        """One line per task in list order, or the empty message."""
        lines = [TaskFormatter.task_line(task) for task in tasks]
        return lines or [EMPTY_MESSAGE]

    @staticmethod
    def to_json_array(tasks: Iterable[Task]) -> str:
        """Same shape as the task file."""
        return json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)

    @staticmethod
    def added(task_id: int, description: str) -> str:
        return f"[+] Added #{task_id}: {description}"

    @staticmethod
    def completed(task_id: int) -> str:
        return f"[✓] Marked #{task_id} done."

    @staticmethod
    def removed(task_id: int) -> str:
        return f"[-] Removed #{task_id}."

    @staticmethod
    def cleared() -> str:
        return "[!] All tasks cleared."


def parse_task_id(raw: str) -> int:
    """
    Parse a task ID given on the command line.

    Only plain ASCII digits are accepted ("1_0", "+1" and non-ASCII digits are not).

    Raises:
        InvalidInputError: If the value is not a positive integer
    """
    value = raw.strip()
    if not (value.isascii() and value.isdigit()) or int(value) < 1:
        raise InvalidInputError(f"Invalid task ID: {raw!r} (expected a positive integer)")
    return int(value)
