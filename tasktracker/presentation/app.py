from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.domain.repositories.task_repository import TaskRepository
from tasktracker.infrastructure.repositories.task_memory_repository import (
    TaskMemoryRepository,
)
from tasktracker.presentation.http.errors import register_exception_handlers
from tasktracker.presentation.http.task_router import router as task_router


def create_app(
    repository: Optional[TaskRepository] = None,
    *,
    cors_allow_origins: Optional[List[str]] = None,
) -> FastAPI:
    """
    Builds the application around one task repository.
    Without an explicit repository a fresh in-memory one is used.
    """
    app = FastAPI(title="Task Tracker")
    if repository is None:
        repository = TaskMemoryRepository()
    app.state.task_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(task_router)
    return app
