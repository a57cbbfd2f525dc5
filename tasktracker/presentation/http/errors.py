from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasktracker.domain.value_objects import parse_task_id

logger = logging.getLogger(__name__)

INVALID_TASK_ID = "Invalid task ID"
INVALID_REQUEST_BODY = "Invalid request body"
TASK_NOT_FOUND = "Task not found"


def _has_bad_task_id(request: Request) -> bool:
    # FastAPI reports undecodable JSON before dependencies parse the path.
    raw = request.path_params.get("task_id")
    if raw is None:
        return False
    try:
        parse_task_id(raw)
    except ValueError:
        return True
    return False


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    FastAPI answers 422 on validation errors, this service answers 400.
    The task id is checked before the body.
    """
    errors = exc.errors()
    if _has_bad_task_id(request):
        detail = INVALID_TASK_ID
    else:
        detail = INVALID_REQUEST_BODY

    logger.info(
        "%s %s rejected: %s (%d validation errors)",
        request.method,
        request.url.path,
        detail,
        len(errors),
    )
    return JSONResponse(status_code=400, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        RequestValidationError,
        request_validation_exception_handler,
    )
