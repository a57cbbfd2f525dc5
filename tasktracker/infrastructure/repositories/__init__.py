from .task_memory_repository import TaskMemoryRepository

__all__ = [
    "TaskMemoryRepository",
]
