# tests/conftest.py
import itertools
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from tasktracker.api.app import create_app
from tasktracker.config import Settings
from tasktracker.storage import SQLiteDB, TaskStore

_counter = itertools.count(1)

DEFAULT_ENV = {
    "TASKTRACKER_LOG_LEVEL": "warning",
    # server host/port are irrelevant for TestClient, but harmless if set elsewhere
}


@pytest.fixture()
def settings() -> Settings:
    """
    App settings for injected-store clients (the store fixture owns the DB).
    """
    return Settings(
        db_path=Path(":memory:"),
        host="127.0.0.1",
        port=8000,
        log_level="warning",
    )


@pytest.fixture()
def store() -> Iterator[TaskStore]:
    """
    Fresh in-memory store per test.
    """
    s = TaskStore(SQLiteDB(Path(":memory:")))
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def client(store: TaskStore, settings: Settings) -> Iterator[TestClient]:
    """
    Default integration test client, wired to the `store` fixture so tests can
    inspect persisted state directly.
    """
    with TestClient(create_app(store=store, settings=settings)) as c:
        yield c


@contextmanager
def _client_ctx(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, *, overrides: Optional[dict[str, str]] = None,
                db_path: Optional[Path] = None) -> Iterator[TestClient]:
    # Unique DB per client instance unless one is provided
    if db_path is None:
        n = next(_counter)
        db_path = tmp_path / f"todo_{n}.sqlite"

    monkeypatch.setenv("TASKTRACKER_DB_PATH", str(db_path))
    for k, v in DEFAULT_ENV.items():
        monkeypatch.setenv(k, v)
    if overrides:
        for k, v in overrides.items():
            monkeypatch.setenv(k, v)

    # No injected store: the lifespan opens one from the environment.
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture()
def client_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Factory for tests that need the env-configured, file-backed app.

    Usage:
      with client_factory() as client:
          ...

      with client_factory(db_path=some_existing_db_path) as client:
          ...
    """

    def _make(*, overrides: Optional[dict[str, str]] = None, db_path: Optional[Path] = None):
        return _client_ctx(monkeypatch, tmp_path, overrides=overrides, db_path=db_path)

    return _make
