from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Dict, List

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.task import Task
from tasktracker.domain.value_objects import TaskId
from tasktracker.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskMemoryRepository(TaskRepository):
    """
    In-memory implementation of TaskRepository.

    One lock guards both the task mapping and the id counter, so every
    operation sees and leaves a consistent state. Ids start at 1 and are
    never reused, even after the task holding them is deleted.
    Nothing survives a process restart.
    """

    def __init__(self) -> None:
        self._tasks: Dict[TaskId, Task] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, title: str, description: str, status: str) -> Task:
        async with self._lock:
            task = Task(
                id=TaskId(self._next_id),
                title=title,
                description=description,
                status=status,
            )
            self._next_id += 1
            self._tasks[task.id] = task

        logger.debug("Task %s created", task.id)
        return task

    async def get(self, task_id: TaskId) -> Task:
        async with self._lock:
            task = self._tasks.get(task_id)

        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def list(self) -> List[Task]:
        async with self._lock:
            return list(self._tasks.values())

    async def update(
        self,
        task_id: TaskId,
        title: str,
        description: str,
        status: str,
    ) -> Task:
        async with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)

            task = replace(
                current,
                title=title,
                description=description,
                status=status,
            )
            self._tasks[task_id] = task

        logger.debug("Task %s updated", task_id)
        return task

    async def delete(self, task_id: TaskId) -> None:
        async with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

        logger.debug("Task %s deleted", task_id)
