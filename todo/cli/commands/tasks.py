"""
FILE: todo/cli/commands/tasks.py
PURPOSE: Task commands (add, list, done, remove, clear)
NOTES:
  - One command per invocation: load -> one store call -> save -> print
  - IDs are validated before the store is opened
"""

import logging
from typing import List, NoReturn

import typer
from rich.text import Text

from ..main import app, error_console
from ...config import get_settings
from ...core.store import TaskStore
from ...core.exceptions import TodoError
from ...formatting import TaskFormatter, parse_task_id

logger = logging.getLogger(__name__)

# Lets "done -3" reach the argument (and fail validation) instead of
# being rejected as an unknown option
ID_COMMAND_SETTINGS = {"ignore_unknown_options": True}


def _open_store(ctx: typer.Context) -> TaskStore:
    settings = ctx.obj or get_settings()
    logger.debug("Using task file %s", settings.store_path)
    return TaskStore(settings.store_path)


def _emit(line: str) -> None:
    # Plain echo keeps tabs and control characters in task text as stored
    typer.echo(line)


def _fail(e: TodoError) -> NoReturn:
    logger.debug("Command failed: %r", e)
    error_console.print(Text.assemble(("Error:", "red"), f" {e}"), soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def add(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., metavar="DESCRIPTION", help="Task description"),
):
    """
    Add a new task.

    Example:
        todo add "Write README"
        todo add Buy groceries
    """
    description = " ".join(words)
    try:
        task_id = _open_store(ctx).add(description)
    except TodoError as e:
        _fail(e)

    _emit(TaskFormatter.added(task_id, description))


@app.command("list")
def ls(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List all tasks.

    Example:
        todo list
        todo list --json
    """
    try:
        tasks = _open_store(ctx).list_tasks()
    except TodoError as e:
        _fail(e)

    if json_output:
        _emit(TaskFormatter.to_json_array(tasks))
        return

    for line in TaskFormatter.to_lines(tasks):
        _emit(line)


@app.command(context_settings=ID_COMMAND_SETTINGS)
def done(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., metavar="ID", help="Task ID to mark done"),
):
    """
    Mark a task done.

    Example:
        todo done 3
    """
    try:
        tid = parse_task_id(task_id)
        _open_store(ctx).complete(tid)
    except TodoError as e:
        _fail(e)

    _emit(TaskFormatter.completed(tid))


@app.command(context_settings=ID_COMMAND_SETTINGS)
def remove(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., metavar="ID", help="Task ID to delete"),
):
    """
    Remove a task.

    Example:
        todo remove 2
    """
    try:
        tid = parse_task_id(task_id)
        _open_store(ctx).remove(tid)
    except TodoError as e:
        _fail(e)

    _emit(TaskFormatter.removed(tid))


@app.command()
def clear(ctx: typer.Context):
    """Remove all tasks."""
    try:
        _open_store(ctx).clear()
    except TodoError as e:
        _fail(e)

    _emit(TaskFormatter.cleared())
