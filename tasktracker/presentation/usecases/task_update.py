from __future__ import annotations

import logging

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.task import Task
from tasktracker.domain.value_objects import TaskId
from tasktracker.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


async def update_task_usecase(
    repo: TaskRepository,
    task_id: TaskId,
    *,
    title: str,
    description: str,
    status: str,
) -> Task:
    """
    Replaces all mutable fields of a task. The id stays the same.
    """
    try:
        task = await repo.update(
            task_id,
            title=title,
            description=description,
            status=status,
        )
    except TaskNotFoundError:
        logger.info("Update of missing task id=%s", task_id)
        raise

    logger.info("Updated task id=%s status=%r", task.id, task.status)
    return task
