# tests/test_config.py
from pathlib import Path

import pytest

from tasktracker.config import load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("TASKTRACKER_DB_PATH", "TASKTRACKER_HOST", "TASKTRACKER_PORT", "TASKTRACKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.db_path == Path("./todo.sqlite")
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "info"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TASKTRACKER_DB_PATH", ":memory:")
    monkeypatch.setenv("TASKTRACKER_PORT", "9090")
    monkeypatch.setenv("TASKTRACKER_LOG_LEVEL", "DEBUG")

    settings = load_settings()
    assert str(settings.db_path) == ":memory:"
    assert settings.port == 9090
    assert settings.log_level == "debug"


@pytest.mark.parametrize("port", ["0", "70000", "eighty"])
def test_invalid_port_rejected(monkeypatch: pytest.MonkeyPatch, port: str):
    monkeypatch.setenv("TASKTRACKER_PORT", port)
    with pytest.raises(ValueError):
        load_settings()
