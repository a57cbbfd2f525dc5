from __future__ import annotations

from tasktracker.domain.task import Task
from tasktracker.domain.value_objects import TaskId
from tasktracker.domain.repositories.task_repository import TaskRepository


async def get_task_usecase(repo: TaskRepository, task_id: TaskId) -> Task:
    """
    Returns one task by id. Raises TaskNotFoundError.
    """
    return await repo.get(task_id)
