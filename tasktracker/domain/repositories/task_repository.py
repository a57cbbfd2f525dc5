from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from tasktracker.domain.task import Task
from tasktracker.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Abstraction over task storage.

    Implementations must make every operation atomic with respect to
    every other one. Lookups of a missing id raise TaskNotFoundError.
    """

    @abstractmethod
    async def create(self, title: str, description: str, status: str) -> Task:
        """
        Assign the next id, store the task and return it.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, task_id: TaskId) -> Task:
        """
        Return the task by id.
        """
        raise NotImplementedError

    @abstractmethod
    async def list(self) -> List[Task]:
        """
        Return a snapshot of all tasks. Order is not part of the contract.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(
        self,
        task_id: TaskId,
        title: str,
        description: str,
        status: str,
    ) -> Task:
        """
        Replace title/description/status of an existing task, keeping its id.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: TaskId) -> None:
        """
        Remove the task permanently.
        """
        raise NotImplementedError
