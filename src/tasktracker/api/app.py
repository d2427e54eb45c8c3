# src/tasktracker/api/app.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasktracker.config import Settings, load_settings
from tasktracker.domain.errors import TaskTrackerError
from tasktracker.domain.kinds import ErrorKind
from tasktracker.domain.models import ErrorResponse
from tasktracker.logging import configure_logging, get_logger
from tasktracker.storage import SQLiteDB, TaskStore

from .routes import router

_LOG = get_logger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

NOT_FOUND_MESSAGE = "task not found"
INTERNAL_MESSAGE = "oops"


def _error_response(kind: ErrorKind, message: str, details: Optional[dict] = None) -> JSONResponse:
    payload = ErrorResponse(error=message, code=kind.value, details=details or {}).model_dump()
    return JSONResponse(status_code=_STATUS_BY_KIND[kind], content=payload)


async def _handle_domain_error(request: Request, err: TaskTrackerError) -> JSONResponse:
    """
    The single place where error kinds become HTTP responses.

    BAD_REQUEST keeps its descriptive message and details, NOT_FOUND gets a
    fixed message and
    INTERNAL is logged in full but answered with an opaque message.
    """
    if err.kind is ErrorKind.BAD_REQUEST:
        return _error_response(err.kind, err.message, err.details)
    if err.kind is ErrorKind.NOT_FOUND:
        return _error_response(err.kind, NOT_FOUND_MESSAGE)
    _LOG.error("%s %s failed: %s", request.method, request.url.path, err, exc_info=err)
    return _error_response(ErrorKind.INTERNAL, INTERNAL_MESSAGE)


async def _handle_validation_error(request: Request, err: RequestValidationError) -> JSONResponse:
    # FastAPI would answer 422; malformed input is a plain bad request here.
    errors = err.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    if loc and loc[0] == "path":
        message = "invalid task id"
    else:
        message = f"malformed task: {first.get('msg', 'invalid request body')}"
    return _error_response(ErrorKind.BAD_REQUEST, message)


async def _handle_unexpected_error(request: Request, err: Exception) -> JSONResponse:
    _LOG.error("%s %s raised unexpectedly", request.method, request.url.path, exc_info=err)
    return _error_response(ErrorKind.INTERNAL, INTERNAL_MESSAGE)


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the FastAPI app around an explicit TaskStore.

    If `store` is None, the lifespan opens one from `settings` (or the
    environment) at startup and closes it on shutdown. An injected store is
    left open; its owner closes it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        cfg = settings or load_settings()
        configure_logging(cfg.log_level)
        app.state.settings = cfg

        owned: Optional[TaskStore] = None
        if app.state.store is None:
            owned = TaskStore(SQLiteDB(cfg.db_path))
            app.state.store = owned

        _LOG.info("Startup complete.")
        try:
            yield
        finally:
            if owned is not None:
                owned.close()
                app.state.store = None
            _LOG.info("Shutdown complete.")

    app = FastAPI(
        title="Task Tracker",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.include_router(router)
    app.add_exception_handler(TaskTrackerError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
    return app


app = create_app()
