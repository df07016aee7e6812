"""
FILE: todo/logging_setup.py
PURPOSE: Logging configuration for the CLI
EXPORTS:
  - resolve_level(verbose) -> int
  - setup_logging(level) -> None
DEPENDENCIES:
  - logging, os, sys (stdlib)
NOTES:
  - Logs go to stderr so they never mix with command output
  - Default WARNING keeps normal runs silent
"""

import logging
import os
import sys

from .core.constants import ENV_LOG_LEVEL

LOGGER_NAME = "todo"


def resolve_level(verbose: bool = False) -> int:
    """--verbose wins, then $TODO_LOG_LEVEL, then WARNING."""
    if verbose:
        return logging.DEBUG

    raw = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.WARNING
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once: handlers from earlier calls are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
