from __future__ import annotations

from dataclasses import dataclass

from .value_objects import TaskId


@dataclass(frozen=True)
class Task:
    """
    Task record.

    id          — assigned by the store, never changes
    title       — free text
    description — free text, may be empty
    status      — free text, usually "pending" or "completed"
    """
    id: TaskId
    title: str
    description: str
    status: str
