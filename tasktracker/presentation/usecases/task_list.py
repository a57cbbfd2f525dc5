from __future__ import annotations

from typing import List

from tasktracker.domain.task import Task
from tasktracker.domain.repositories.task_repository import TaskRepository


async def list_tasks_usecase(repo: TaskRepository) -> List[Task]:
    return await repo.list()
