# src/tasktracker/domain/kinds.py
from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """
    Error categories surfaced at the HTTP boundary.

    Every domain error carries exactly one kind; the API layer inspects it
    once to pick the status code and the client-facing message.

      - BAD_REQUEST: malformed client input (bad id, bad body, ID mismatch)
      - NOT_FOUND: no task with the addressed id
      - INTERNAL: database/driver failure; details are logged, never returned
    """

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"
