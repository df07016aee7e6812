"""
FILE: todo/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TodoError (base exception)
  - InvalidInputError
  - TaskNotFoundError
  - CorruptStoreError
  - PersistenceError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TodoError for easy catching
  - Exceptions include context (IDs, paths) for helpful error messages
  - Store raises these, CLI layer catches and displays
"""


class TodoError(Exception):
    """Base exception for all todo errors."""
    pass


class InvalidInputError(TodoError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)


class TaskNotFoundError(TodoError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task #{task_id} not found.")


class CorruptStoreError(TodoError):
    """Task file exists but could not be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt task file {path}: {reason}")


class PersistenceError(TodoError):
    """Task file could not be read or written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Storage error for {path}: {reason}")
