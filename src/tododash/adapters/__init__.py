"""Adapters - I/O implementations of ports."""

from .todoist_api import TodoistAdapter
from .file_config_store import FileConfigStore

__all__ = [
    "TodoistAdapter",
    "FileConfigStore",
]
