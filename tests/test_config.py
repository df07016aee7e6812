"""
Tests for store path resolution and logging configuration.
"""

import logging

import pytest

from todo import config
from todo.config import get_settings, default_data_dir
from todo.logging_setup import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's real environment."""
    for name in ("TODO_FILE", "TODO_DATA_DIR", "XDG_DATA_HOME", "APPDATA", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.setattr(config.sys, "platform", "linux")


def test_explicit_file_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "ignored"))
    settings = get_settings(tmp_path / "mine.json")
    assert settings.store_path == tmp_path / "mine.json"


def test_explicit_file_expands_user(tmp_path):
    settings = get_settings("~/tasks.json")
    assert settings.store_path == tmp_path / "home" / "tasks.json"


def test_data_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "custom"))
    assert get_settings().store_path == tmp_path / "custom" / "tasks.json"


def test_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert get_settings().store_path == tmp_path / "xdg" / "todo" / "tasks.json"


def test_relative_xdg_data_home_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", "relative/dir")
    assert default_data_dir() == tmp_path / "home" / ".local" / "share" / "todo"


def test_default_unix_location(tmp_path):
    assert get_settings().store_path == tmp_path / "home" / ".local" / "share" / "todo" / "tasks.json"


def test_windows_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
    assert default_data_dir() == tmp_path / "Roaming" / "todo"


def test_windows_without_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "platform", "win32")
    assert default_data_dir() == tmp_path / "home" / "AppData" / "Roaming" / "todo"


def test_empty_overrides_are_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_DATA_DIR", "  ")
    assert default_data_dir() == tmp_path / "home" / ".local" / "share" / "todo"
    assert get_settings("").store_path.name == "tasks.json"


# --- Logging ---


def test_default_level_is_warning():
    assert resolve_level() == logging.WARNING


def test_verbose_is_debug(monkeypatch):
    monkeypatch.setenv("TODO_LOG_LEVEL", "ERROR")
    assert resolve_level(verbose=True) == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("TODO_LOG_LEVEL", "info")
    assert resolve_level() == logging.INFO


def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    assert resolve_level() == logging.WARNING


def test_setup_logging_replaces_handlers():
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)

    logger = logging.getLogger("todo")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
