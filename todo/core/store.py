"""
FILE: todo/core/store.py
PURPOSE: JSON-file persistence and mutation of the ordered task list
EXPORTS:
  - TaskStore(path)
      .load() -> List[Task]
      .save() -> None
      .add(description) -> int
      .list_tasks() -> Tuple[Task, ...]
      .complete(task_id) -> Task
      .remove(task_id) -> Task
      .clear() -> None
      .next_id() -> int
DEPENDENCIES:
  - json, os, stat, tempfile, pathlib, logging (stdlib)
  - todo.core.models (Task)
  - todo.core.exceptions (InvalidInputError, TaskNotFoundError, CorruptStoreError, PersistenceError)
NOTES:
  - The file path is injected at construction (see todo.config)
  - Missing or zero-byte file -> empty list
  - Every mutation saves before returning; a failed save raises PersistenceError
    even though the in-memory list has already changed
  - IDs are max(existing) + 1, so removing the highest id frees it for reuse
  - No inter-process locking: concurrent runs race and the last writer wins
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from .models import Task, is_valid_text
from .exceptions import (
    InvalidInputError,
    TaskNotFoundError,
    CorruptStoreError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def _file_mode(path: Path) -> int:
    """Mode for a rewritten task file: keep the old one, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class TaskStore:
    """Owns the task list for one process run."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._tasks: Optional[List[Task]] = None

    # --- Persistence ---

    def load(self) -> List[Task]:
        """
        Read the task file into memory.

        Returns:
            The loaded list (empty if the file does not exist or is blank)

        Raises:
            CorruptStoreError: If the file exists but is not a valid task array
            PersistenceError: If the file exists but cannot be read
        """
        logger.debug("Loading tasks from %s", self.path)

        if not self.path.exists():
            logger.debug("No task file yet, starting empty")
            self._tasks = []
            return self._tasks

        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptStoreError(self.path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise PersistenceError(self.path, e.strerror or str(e)) from e

        if not raw.strip():
            self._tasks = []
            return self._tasks

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(self.path, str(e)) from e

        self._tasks = self._parse(data)
        logger.debug("Loaded %d task(s)", len(self._tasks))
        return self._tasks

    def _parse(self, data) -> List[Task]:
        if not isinstance(data, list):
            raise CorruptStoreError(
                self.path, f"expected a JSON array, got {type(data).__name__}"
            )

        tasks = []
        seen = set()
        for index, item in enumerate(data):
            try:
                task = Task.from_dict(item)
            except ValueError as e:
                raise CorruptStoreError(self.path, f"entry {index}: {e}") from e
            if task.id in seen:
                raise CorruptStoreError(self.path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def save(self) -> None:
        """
        Write the task list to disk.

        Creates parent directories as needed. The JSON is written to a
        temporary file next to the target and moved into place, so a crash
        mid-write leaves the previous file intact. A symlinked task file is
        followed; the existing file mode is kept (new files follow the umask).

        Raises:
            PersistenceError: If the directory or file cannot be written
        """
        tasks = self._ensure_loaded()
        text = json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)
        try:
            payload = (text + "\n").encode("utf-8")
        except UnicodeEncodeError as e:
            raise PersistenceError(self.path, f"task text is not valid UTF-8 ({e.reason})") from e

        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(
                self.path, f"cannot create {directory}: {e.strerror or e}"
            ) from e

        target = self.path.resolve()
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.chmod(tmp_name, _file_mode(target))
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(self.path, e.strerror or str(e)) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)

    def _ensure_loaded(self) -> List[Task]:
        if self._tasks is None:
            self.load()
        return self._tasks

    # --- Queries ---

    def list_tasks(self) -> Tuple[Task, ...]:
        """Return all tasks in insertion order (read-only snapshot)."""
        return tuple(self._ensure_loaded())

    def next_id(self) -> int:
        return max((task.id for task in self._ensure_loaded()), default=0) + 1

    def _find(self, task_id: int) -> Task:
        for task in self._ensure_loaded():
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    # --- Mutations (each one saves) ---

    def add(self, description: str) -> int:
        """
        Append a new task.

        Args:
            description: Task text, stored verbatim

        Returns:
            The id assigned to the new task

        Raises:
            InvalidInputError: If description is blank or not valid text
            PersistenceError: If saving fails
        """
        if not description or not description.strip():
            raise InvalidInputError("Task description cannot be empty")
        if not is_valid_text(description):
            raise InvalidInputError("Task description contains undecodable characters")

        tasks = self._ensure_loaded()
        task_id = self.next_id()
        tasks.append(Task(id=task_id, description=description))
        logger.debug("Added task %d", task_id)

        self.save()
        return task_id

    def complete(self, task_id: int) -> Task:
        """
        Mark a task done.

        Idempotent: completing an already-done task succeeds and still saves.

        Raises:
            TaskNotFoundError: If no task has this id
            PersistenceError: If saving fails
        """
        task = self._find(task_id)
        task.done = True
        logger.debug("Completed task %d", task_id)

        self.save()
        return task

    def remove(self, task_id: int) -> Task:
        """
        Delete a task, keeping the order of the others.

        Returns:
            The removed Task

        Raises:
            TaskNotFoundError: If no task has this id
            PersistenceError: If saving fails
        """
        task = self._find(task_id)
        self._tasks.remove(task)
        logger.debug("Removed task %d", task_id)

        self.save()
        return task

    def clear(self) -> None:
        """Remove every task. Clearing an empty store is a successful no-op."""
        tasks = self._ensure_loaded()
        count = len(tasks)
        tasks.clear()
        logger.debug("Cleared %d task(s)", count)

        self.save()
