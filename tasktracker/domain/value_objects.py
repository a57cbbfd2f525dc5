from __future__ import annotations

import re
from enum import Enum
from typing import NewType

TaskId = NewType("TaskId", int)

# Ids are signed 64-bit values on the wire.
MAX_TASK_ID = 2**63 - 1

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


class TaskStatus(str, Enum):
    """
    Conventional status values. The store accepts any string.
    """
    PENDING = "pending"
    COMPLETED = "completed"


def parse_task_id(raw: str) -> TaskId:
    """
    Parses a decimal task id in 1..MAX_TASK_ID.
    Raises ValueError for anything else (floats, "1_0", spaces, overflow).
    """
    if _TASK_ID_RE.fullmatch(raw) is None:
        raise ValueError(f"Invalid task id: {raw!r}")

    value = int(raw)
    if value < 1 or value > MAX_TASK_ID:
        raise ValueError(f"Task id out of range: {raw!r}")
    return TaskId(value)
