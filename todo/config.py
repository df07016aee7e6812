"""
FILE: todo/config.py
PURPOSE: Resolve where the task file lives
EXPORTS:
  - Settings (frozen dataclass)
  - default_data_dir() -> Path
  - get_settings(store_file) -> Settings
DEPENDENCIES:
  - os, sys, pathlib (stdlib)
  - todo.core.constants
NOTES:
  - Resolution order: explicit path, $TODO_DATA_DIR, $XDG_DATA_HOME,
    %APPDATA% (Windows), ~/.local/share
  - Settings is passed to TaskStore; nothing reads the path globally
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .core.constants import APP_NAME, STORE_FILENAME, ENV_DATA_DIR


@dataclass(frozen=True)
class Settings:
    store_path: Path


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    """
    Per-user data directory for the app.

    Linux/macOS: $XDG_DATA_HOME/todo or ~/.local/share/todo
    Windows:     %APPDATA%\\todo
    """
    override = _env_path(ENV_DATA_DIR)
    if override is not None:
        return override

    # XDG spec: relative values are invalid and must be ignored
    xdg = _env_path("XDG_DATA_HOME")
    if xdg is not None and xdg.is_absolute():
        return xdg / APP_NAME

    if sys.platform == "win32":
        appdata = _env_path("APPDATA")
        base = appdata if appdata is not None else Path.home() / "AppData" / "Roaming"
        return base / APP_NAME

    return Path.home() / ".local" / "share" / APP_NAME


def get_settings(store_file: Optional[Union[str, Path]] = None) -> Settings:
    """Build Settings, preferring an explicit store file (--file / $TODO_FILE)."""
    if store_file:
        return Settings(store_path=Path(store_file).expanduser())
    return Settings(store_path=default_data_dir() / STORE_FILENAME)
