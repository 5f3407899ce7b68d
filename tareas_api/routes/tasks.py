"""Task management CRUD routes."""

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from ..deps import get_task_store
from ..errors import ErrorKind, TaskError
from ..models.task import Task
from ..schemas import ErrorResponse, TaskPayload
from ..services.task_service import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tareas", tags=["tareas"])

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MIN_ID, _MAX_ID = -(2 ** 63), 2 ** 63 - 1

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def parse_task_id(raw: str) -> int:
    """Parse a path identifier: optional sign followed by ASCII digits,
    within the signed 64-bit range.

    Raises:
        TaskError: INVALID_ID for anything else
    """
    if not _INTEGER.fullmatch(raw):
        raise TaskError(ErrorKind.INVALID_ID)
    task_id = int(raw)
    if not _MIN_ID <= task_id <= _MAX_ID:
        raise TaskError(ErrorKind.INVALID_ID)
    return task_id


async def read_payload(request: Request) -> TaskPayload:
    """Decode the request body into a task payload.

    Raises:
        TaskError: INVALID_BODY if the body is not a JSON object of the
            expected shape
    """
    body = await request.body()
    try:
        return TaskPayload.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Rejected request body: {e.errors()}")
        raise TaskError(ErrorKind.INVALID_BODY)


@router.get("", response_model=List[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)) -> List[Task]:
    """List all tasks in creation order."""
    return store.list_all()


@router.get("/{task_id}", response_model=Task, responses=_ERROR_RESPONSES)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Task:
    """Get a specific task by ID."""
    return store.get_task(parse_task_id(task_id))


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_task(request: Request, store: TaskStore = Depends(get_task_store)) -> Task:
    """Create a new task.

    Missing status and priority default to ``pending`` and ``medium``.
    """
    payload = await read_payload(request)
    logger.info(f"Creating new task: {payload.title!r}")
    return store.create_task(payload)


@router.put("/{task_id}", response_model=Task, responses=_ERROR_RESPONSES)
async def update_task(
    task_id: str,
    request: Request,
    store: TaskStore = Depends(get_task_store),
) -> Task:
    """Replace a task, keeping its id and creation time.

    The id is checked before the body is read, so an unknown id answers 404
    even when the body is malformed.
    """
    task_id = parse_task_id(task_id)
    store.get_task(task_id)

    payload = await read_payload(request)
    logger.info(f"Updating task: {task_id}")
    return store.update_task(task_id, payload)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Response:
    """Delete a task."""
    task_id = parse_task_id(task_id)
    logger.info(f"Deleting task: {task_id}")
    store.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
