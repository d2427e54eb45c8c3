from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an int, got: {raw!r}") from e
    return value


def _get_env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    # Database (a file path, or ":memory:")
    db_path: Path

    # Server (used by tasktracker.main when starting uvicorn programmatically)
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    """
    Loads settings from env vars with sane defaults.

    Env vars:
      - TASKTRACKER_DB_PATH (default: ./todo.sqlite)
      - TASKTRACKER_HOST (default: 127.0.0.1)
      - TASKTRACKER_PORT (default: 8000)
      - TASKTRACKER_LOG_LEVEL (default: info)
    """
    raw_db_path = _get_env_str("TASKTRACKER_DB_PATH", "./todo.sqlite")
    db_path = Path(raw_db_path) if raw_db_path == ":memory:" else Path(raw_db_path).expanduser()

    host = _get_env_str("TASKTRACKER_HOST", "127.0.0.1")
    port = _get_env_int("TASKTRACKER_PORT", 8000)
    if not (1 <= port <= 65535):
        raise ValueError("TASKTRACKER_PORT must be between 1 and 65535")

    log_level = _get_env_str("TASKTRACKER_LOG_LEVEL", "info").lower()

    return Settings(
        db_path=db_path,
        host=host,
        port=port,
        log_level=log_level,
    )
