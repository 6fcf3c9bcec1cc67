"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.config import Settings
from task_tracker.db import TaskStore
from task_tracker.main import create_app
from task_tracker.services import TaskService


@pytest.fixture()
def store() -> TaskStore:
    """In-memory store seeded with the sample tasks."""
    store = TaskStore(":memory:")
    store.initialize()
    yield store
    store.close()


@pytest.fixture()
def empty_store() -> TaskStore:
    store = TaskStore(":memory:", seed=False)
    store.initialize()
    yield store
    store.close()


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test database file."""
    return Settings(
        database_path=str(tmp_path / "tasks.sqlite3"),
        seed_sample_data=True,
        cors_origins=["http://localhost:3000"],
    )


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    """TestClient with the lifespan running, so the store is open."""
    with TestClient(create_app(settings)) as client:
        yield client
