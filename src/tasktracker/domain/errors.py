# src/tasktracker/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .kinds import ErrorKind


@dataclass(eq=False)
class TaskTrackerError(Exception):
    """
    Base domain error.

    The API layer maps these to HTTP responses by `kind`.
    """
    message: str
    kind: ErrorKind = ErrorKind.INTERNAL
    details: Optional[dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class BadRequestError(TaskTrackerError):
    kind: ErrorKind = ErrorKind.BAD_REQUEST


@dataclass(eq=False)
class NotFoundError(TaskTrackerError):
    kind: ErrorKind = ErrorKind.NOT_FOUND


@dataclass(eq=False)
class StoreError(TaskTrackerError):
    kind: ErrorKind = ErrorKind.INTERNAL
