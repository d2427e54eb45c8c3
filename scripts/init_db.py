#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from tasktracker.config import load_settings
from tasktracker.logging import configure_logging, get_logger
from tasktracker.storage import SQLiteDB, TaskStore


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    log = get_logger(__name__)

    db = SQLiteDB(settings.db_path)
    if db.in_memory:
        log.error("TASKTRACKER_DB_PATH is :memory:; nothing to initialize on disk.")
        return 1

    # Creating the store bootstraps the schema (idempotent).
    store = TaskStore(db)
    try:
        count = len(store.list())
    finally:
        store.close()

    log.info("DB initialized at %s (%d task(s))", settings.db_path, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
