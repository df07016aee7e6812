"""
FILE: todo/cli/main.py
PURPOSE: Typer-based CLI for one-shot task commands
EXPORTS:
  - app (Typer application)
  - console, error_console (Rich consoles)
  - main() (entry point)
  - add() - Append a task
  - ls() - List tasks (command name: list)
  - done() - Mark task done
  - remove() - Delete task
  - clear() - Delete all tasks
DEPENDENCIES:
  - typer (CLI framework)
  - rich (console output)
  - todo.config (store path resolution)
  - todo.logging_setup (log configuration)
NOTES:
  - Global options (--file, --verbose, --version) go before the command
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error, 2=usage error
"""

import sys
from typing import Optional

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from .. import __version__
from ..config import get_settings
from ..core.constants import ENV_FILE
from ..logging_setup import resolve_level, setup_logging

# Typer app setup
app = typer.Typer(
    name="todo",
    help="Simple personal task tracker",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


def _version_callback(value: bool):
    if value:
        console.print(f"todo v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    store_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        envvar=ENV_FILE,
        help="Path to the task file (default: <data dir>/todo/tasks.json)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Track short text tasks from the terminal.

    Example:
        todo add "Buy groceries"
        todo list
        todo done 1
    """
    setup_logging(resolve_level(verbose))
    ctx.obj = get_settings(store_file)

    if ctx.invoked_subcommand is None:
        error_console.print(ctx.get_usage(), markup=False, highlight=False)
        error_console.print("Try 'todo --help' for help.", markup=False, highlight=False)
        raise typer.Exit(2)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    add,
    ls,
    done,
    remove,
    clear,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
