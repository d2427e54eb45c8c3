# src/tasktracker/api/routes.py
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from tasktracker.domain.errors import BadRequestError
from tasktracker.domain.models import INT64_MAX, INT64_MIN, Task
from tasktracker.logging import get_logger
from tasktracker.storage import TaskStore

from .deps import get_store

_LOG = get_logger(__name__)
router = APIRouter()

# Plain base-10 digits with an optional sign; no whitespace, no underscores.
TaskIdPath = Annotated[str, Path(pattern=r"^[+-]?[0-9]+$")]


def _parse_id(raw: str) -> int:
    try:
        task_id = int(raw)
    except ValueError as e:
        # more digits than int() will convert
        raise BadRequestError("invalid task id", details={"id": raw[:32]}) from e
    if not (INT64_MIN <= task_id <= INT64_MAX):
        raise BadRequestError("invalid task id", details={"id": raw})
    return task_id


@router.get("/healthz")
def healthz() -> dict:
    return {"ok": True}


@router.get("/task/", response_model=list[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    """
    req: GET /task/
    res: 200 [{"ID": 1, "Title": "Learn Python", "Done": false}, ...]
    """
    return store.list()


@router.post("/task/", response_model=Task)
def new_task(task: Task, store: TaskStore = Depends(get_store)):
    """
    Create a task. Empty titles are accepted; any ID in the body is replaced.

    req: POST /task/ {"Title": "Buy bread"}
    res: 200 {"ID": 2, "Title": "Buy bread", "Done": false}
    """
    saved = store.save(task)
    _LOG.debug("Created task %d", saved.id)
    return saved


@router.get("/task/{task_id}", response_model=Task)
def get_task(task_id: TaskIdPath, store: TaskStore = Depends(get_store)):
    """
    req: GET /task/42
    res: 404 {"error": "task not found", "code": "NOT_FOUND"}
    """
    return store.find(_parse_id(task_id))


@router.put("/task/{task_id}", response_model=Task)
def update_task(task_id: TaskIdPath, task: Task, store: TaskStore = Depends(get_store)):
    """
    Replace title and done of an existing task.

    req: PUT /task/2 {"ID": 1, "Title": "Learn Python", "Done": true}
    res: 400 {"error": "inconsistent task IDs", "code": "BAD_REQUEST"}
    """
    path_id = _parse_id(task_id)
    if task.id != path_id:
        raise BadRequestError(
            "inconsistent task IDs",
            details={"path_id": path_id, "body_id": task.id},
        )
    return store.update(task)


@router.delete("/task/{task_id}")
def delete_task(task_id: TaskIdPath, store: TaskStore = Depends(get_store)) -> Response:
    store.delete(_parse_id(task_id))
    return Response(status_code=200)
