from .errors import TaskNotFoundError
from .task import Task
from .value_objects import MAX_TASK_ID, TaskId, TaskStatus, parse_task_id

__all__ = [
    "Task",
    "TaskId",
    "TaskStatus",
    "MAX_TASK_ID",
    "parse_task_id",
    "TaskNotFoundError",
]
