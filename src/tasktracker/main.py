from __future__ import annotations

import uvicorn

from tasktracker.api.app import create_app
from tasktracker.config import load_settings
from tasktracker.logging import configure_logging, get_logger

_LOG = get_logger(__name__)


def main() -> int:
    """
    Serve the task tracker with the settings read from the environment.

    For development with auto-reload use instead:
      uvicorn tasktracker.api.app:app --reload
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    _LOG.info("Serving tasks from %s on %s:%d", settings.db_path, settings.host, settings.port)

    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
