from __future__ import annotations

from .value_objects import TaskId


class TaskNotFoundError(Exception):
    def __init__(self, task_id: TaskId) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
