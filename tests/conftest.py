"""Shared pytest configuration and fixtures for tests."""

import sys
import io
import logging
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def store_path(tmp_path):
    """Task file location inside a not-yet-created directory."""
    return tmp_path / "data" / "todo" / "tasks.json"


@pytest.fixture(autouse=True)
def reset_todo_logger():
    """CLI runs attach handlers to stderr streams that are closed afterwards."""
    yield
    logger = logging.getLogger("todo")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
