from __future__ import annotations

import logging

from tasktracker.domain.task import Task
from tasktracker.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


async def create_task_usecase(
    repo: TaskRepository,
    *,
    title: str,
    description: str,
    status: str,
) -> Task:
    """
    Creates a task. The id is always assigned by the repository.
    """
    task = await repo.create(title=title, description=description, status=status)
    logger.info("Created task id=%s status=%r", task.id, task.status)
    return task
