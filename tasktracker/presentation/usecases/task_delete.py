from __future__ import annotations

import logging

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.value_objects import TaskId
from tasktracker.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


async def delete_task_usecase(repo: TaskRepository, task_id: TaskId) -> None:
    try:
        await repo.delete(task_id)
    except TaskNotFoundError:
        logger.info("Delete of missing task id=%s", task_id)
        raise

    logger.info("Deleted task id=%s", task_id)
