from __future__ import annotations

from fastapi import HTTPException, Path, Request

from tasktracker.domain.value_objects import TaskId, parse_task_id
from tasktracker.domain.repositories.task_repository import TaskRepository
from tasktracker.presentation.http.errors import INVALID_TASK_ID


def get_task_repository(request: Request) -> TaskRepository:
    """
    The repository is created once per application in create_app.
    """
    return request.app.state.task_repository


def valid_task_id(
    task_id: str = Path(..., description="Task identifier (integer >= 1)"),
) -> TaskId:
    """
    Strict decimal parsing of the {task_id} segment. Runs before the body
    is validated, so a bad id is reported first.
    """
    try:
        return parse_task_id(task_id)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_TASK_ID)
