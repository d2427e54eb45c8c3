"""
Domain layer for the task tracker.

- kinds: ErrorKind enum
- models: Pydantic models for API input/output
- errors: domain-level exceptions
"""

from .kinds import ErrorKind
from .models import ErrorResponse, Task
from .errors import (
    TaskTrackerError,
    BadRequestError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "ErrorKind",
    "Task",
    "ErrorResponse",
    "TaskTrackerError",
    "BadRequestError",
    "NotFoundError",
    "StoreError",
]
