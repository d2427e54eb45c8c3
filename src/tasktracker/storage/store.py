# src/tasktracker/storage/store.py
from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from tasktracker.domain.errors import NotFoundError, StoreError
from tasktracker.domain.models import Task
from tasktracker.logging import get_logger

from .db import SQLiteDB

_LOG = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
  id    INTEGER PRIMARY KEY AUTOINCREMENT,
  title TEXT,
  done  BOOLEAN
);
"""


class TaskStore:
    """
    Persistence for tasks in a single `tasks` table.

    Important invariants:
    - The table is created if missing; existing rows are never dropped or migrated.
    - One connection per store, shared by all request threads and serialized
      by a lock. Every call hits the database; nothing is cached.
    - Driver errors surface as StoreError (the sqlite3 error is chained).
    """

    def __init__(self, db: SQLiteDB) -> None:
        self._db = db
        self._lock = threading.Lock()
        try:
            self._conn: Optional[sqlite3.Connection] = db.connect()
        except sqlite3.Error as e:
            raise StoreError(f"open database failed: {e}", details={"db_path": str(db.db_path)}) from e

        with self._locked("create schema") as conn:
            conn.execute(SCHEMA)
        _LOG.info("TaskStore ready db=%s", db.db_path)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # -------------------------
    # Read operations
    # -------------------------

    def find(self, task_id: int) -> Task:
        with self._locked("find task") as conn:
            row = conn.execute(
                "SELECT id, title, done FROM tasks WHERE id = ?;",
                (task_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError(f"Task not found: {task_id}", details={"id": task_id})
        return _row_to_task(row)

    def list(self) -> list[Task]:
        with self._locked("list tasks") as conn:
            rows = conn.execute("SELECT id, title, done FROM tasks;").fetchall()
        return [_row_to_task(row) for row in rows]

    # -------------------------
    # Write operations
    # -------------------------

    def save(self, task: Task) -> Task:
        """
        Inserts `task` as a new row and assigns its generated id in place.
        Any id already set on `task` is ignored.
        """
        with self._locked("save task") as conn:
            cur = conn.execute(
                "INSERT INTO tasks(title, done) VALUES (?, ?);",
                (task.title, task.done),
            )
            task.id = int(cur.lastrowid)
        return task

    def update(self, task: Task) -> Task:
        """
        Replaces title/done of the row with `task.id`.

        A single guarded UPDATE: existence is decided by the affected-row count,
        so there is no window between an existence check and the write.
        """
        with self._locked("update task") as conn:
            updated = conn.execute(
                "UPDATE tasks SET title = ?, done = ? WHERE id = ?;",
                (task.title, task.done, task.id),
            ).rowcount
        if updated == 0:
            raise NotFoundError(f"Task not found: {task.id}", details={"id": task.id})
        return task

    def delete(self, task_id: int) -> None:
        # Deleting a missing id is a no-op.
        with self._locked("delete task") as conn:
            conn.execute("DELETE FROM tasks WHERE id = ?;", (task_id,))

    # -------------------------
    # Helpers
    # -------------------------

    @contextmanager
    def _locked(self, op: str) -> Iterator[sqlite3.Connection]:
        with self._lock:
            if self._conn is None:
                raise StoreError(f"{op} failed: store is closed")
            try:
                yield self._conn
            except sqlite3.Error as e:
                raise StoreError(f"{op} failed: {e}", details={"op": op}) from e


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(
        id=int(row["id"]),
        title=row["title"] if row["title"] is not None else "",
        done=bool(row["done"]),
    )
