"""
FILE: todo/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - APP_NAME, STORE_FILENAME: store location pieces
  - ENV_*: environment variable names
  - MARK_DONE, MARK_TODO: list markers
NOTES:
  - Centralized constants to avoid magic strings
"""

APP_NAME = "todo"
STORE_FILENAME = "tasks.json"

# Environment variables
ENV_FILE = "TODO_FILE"
ENV_DATA_DIR = "TODO_DATA_DIR"
ENV_LOG_LEVEL = "TODO_LOG_LEVEL"

# List markers
MARK_DONE = "[x]"
MARK_TODO = "[ ]"
