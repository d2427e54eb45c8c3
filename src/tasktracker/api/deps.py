# src/tasktracker/api/deps.py
from __future__ import annotations

from fastapi import Request

from tasktracker.storage import TaskStore


def get_store(request: Request) -> TaskStore:
    """
    Per-request access to the TaskStore stored on app.state (injected into
    create_app, or opened during startup).
    """
    return request.app.state.store  # type: ignore[attr-defined]
