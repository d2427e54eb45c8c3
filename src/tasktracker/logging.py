from __future__ import annotations

import logging
import sys
from typing import Optional

_HANDLER_NAME = "tasktracker-stdout"


def configure_logging(log_level: str = "info") -> None:
    """
    Configures root logging for the service.

    - logs to stdout
    - consistent format
    - replaces only the handler installed here, so repeated init (reload,
      one app per test) never stacks duplicates or drops foreign handlers
    """
    level = _parse_level(log_level)

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(max(level, logging.INFO))
    logging.getLogger("uvicorn.error").setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else "tasktracker")


def _parse_level(log_level: str) -> int:
    mapping = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": logging.DEBUG,  # Python stdlib has no TRACE; map to DEBUG.
    }
    return mapping.get(log_level.lower().strip(), logging.INFO)
