# src/tasktracker/storage/__init__.py
"""
Storage layer for the task tracker (SQLite).

- db: connection factory + pragmas
- store: task persistence (find/list/save/update/delete)
"""

from .db import SQLiteDB
from .store import TaskStore

__all__ = ["SQLiteDB", "TaskStore"]
