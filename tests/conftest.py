# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasktracker.infrastructure.repositories.task_memory_repository import (
    TaskMemoryRepository,
)
from tasktracker.presentation.app import create_app


@pytest.fixture()
def repository() -> TaskMemoryRepository:
    return TaskMemoryRepository()


@pytest.fixture()
def app(repository: TaskMemoryRepository) -> FastAPI:
    """
    Application wired to the per-test repository, so tests can inspect
    the store directly after going through HTTP.
    """
    return create_app(repository)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
