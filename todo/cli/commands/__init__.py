"""
FILE: todo/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

from .tasks import (
    add,
    ls,
    done,
    remove,
    clear,
)

__all__ = [
    "add",
    "ls",
    "done",
    "remove",
    "clear",
]
