from .task_create import create_task_usecase
from .task_delete import delete_task_usecase
from .task_get import get_task_usecase
from .task_list import list_tasks_usecase
from .task_update import update_task_usecase

__all__ = [
    "create_task_usecase",
    "delete_task_usecase",
    "get_task_usecase",
    "list_tasks_usecase",
    "update_task_usecase",
]
