# src/tasktracker/storage/db.py
from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

MEMORY = ":memory:"


@dataclass(frozen=True)
class SQLiteDB:
    """
    SQLite connection factory.

    Notes:
    - Connections are created with check_same_thread=False; the caller owns
      serialization (see TaskStore).
    - Apply pragmas on each connection.
    - ":memory:" gives a private database that lives as long as its connection.
    """
    db_path: Path
    timeout_s: float = 5.0

    @property
    def in_memory(self) -> bool:
        return str(self.db_path) == MEMORY

    def connect(self) -> sqlite3.Connection:
        if not self.in_memory:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(
            str(self.db_path),
            timeout=self.timeout_s,
            isolation_level=None,          # autocommit; every statement is its own transaction
            check_same_thread=False,       # shared across request threads behind a lock
        )
        conn.row_factory = sqlite3.Row
        self._apply_pragmas(conn)
        return conn

    def _apply_pragmas(self, conn: sqlite3.Connection) -> None:
        cur = conn.cursor()
        if not self.in_memory:
            # Better concurrency with external readers (e.g. sqlite3 CLI)
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
        # Reduce spurious 'database is locked'
        cur.execute(f"PRAGMA busy_timeout={int(self.timeout_s * 1000)};")
        cur.close()
