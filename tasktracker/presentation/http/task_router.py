from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field, field_validator

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.task import Task
from tasktracker.domain.value_objects import TaskId
from tasktracker.domain.repositories.task_repository import TaskRepository
from tasktracker.presentation.http.dependencies import get_task_repository, valid_task_id
from tasktracker.presentation.http.errors import INVALID_TASK_ID, TASK_NOT_FOUND
from tasktracker.presentation.usecases.task_create import create_task_usecase
from tasktracker.presentation.usecases.task_delete import delete_task_usecase
from tasktracker.presentation.usecases.task_get import get_task_usecase
from tasktracker.presentation.usecases.task_list import list_tasks_usecase
from tasktracker.presentation.usecases.task_update import update_task_usecase

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)


# ---------- Schemas ----------


class TaskPayload(BaseModel):
    """
    Body of create and update requests.

    Missing fields become empty strings. A client-supplied "id" is
    not a field here and is dropped.
    """
    title: str = Field(
        "",
        description="Task title",
        examples=["Buy milk"],
    )
    description: str = Field(
        "",
        description="Free text description",
    )
    status: str = Field(
        "",
        description='Free text status, usually "pending" or "completed"',
        examples=["pending"],
    )

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def normalize_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            # Lone surrogates from \uXXXX escapes cannot be encoded as UTF-8.
            return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
        return value


class TaskResponse(BaseModel):
    id: int = Field(
        ...,
        description="Identifier assigned by the service",
    )
    title: str
    description: str
    status: str


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
    )


# ---------- Endpoints ----------


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List tasks",
    description="Returns every stored task. Order is not guaranteed.",
)
async def list_tasks(
    repo: TaskRepository = Depends(get_task_repository),
) -> List[TaskResponse]:
    tasks = await list_tasks_usecase(repo)
    return [_to_response(t) for t in tasks]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    summary="Create a task",
    description="Stores a new task. Any id in the body is ignored.",
)
async def create_task(
    payload: TaskPayload,
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    task = await create_task_usecase(
        repo,
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    return _to_response(task)


@router.api_route(
    "/",
    methods=["GET", "PUT", "DELETE"],
    include_in_schema=False,
)
async def missing_task_id() -> Response:
    # "/tasks/" is an item path with an empty id, not the collection.
    raise HTTPException(status_code=400, detail=INVALID_TASK_ID)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task",
)
async def get_task(
    task_id: TaskId = Depends(valid_task_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    try:
        task = await get_task_usecase(repo, task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return _to_response(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
    description=(
        "Replaces title, description and status. The id from the path is kept, "
        "an id in the body is ignored."
    ),
)
async def update_task(
    payload: TaskPayload,
    task_id: TaskId = Depends(valid_task_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    try:
        task = await update_task_usecase(
            repo,
            task_id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
        )
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return _to_response(task)


@router.delete(
    "/{task_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a task",
)
async def delete_task(
    task_id: TaskId = Depends(valid_task_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> Response:
    try:
        await delete_task_usecase(repo, task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return Response(status_code=204)
