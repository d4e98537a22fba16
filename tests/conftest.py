from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.setup.api_config import ApiSettings
from src.taskmanager.domain.exceptions import TaskStoreError
from src.taskmanager.domain.models import Task, TaskPayload
from src.taskmanager.domain.repositories import TaskStore
from src.taskmanager.presentation.main import create_app


class StubTaskStore(TaskStore):
    """Simple in-memory TaskStore replacement for tests.

    Operation names listed in ``failing`` raise ``TaskStoreError``.
    """

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self.failing: set[str] = set()
        self._counter = 0

    def _check(self, operation: str, task_id: int | None = None) -> None:
        if operation in self.failing:
            raise TaskStoreError(operation, task_id)

    async def list_all(self) -> list[Task]:
        self._check("list_all")
        return list(self.tasks.values())

    async def find_by_id(self, task_id: int) -> Task | None:
        self._check("find_by_id", task_id)
        return self.tasks.get(task_id)

    async def create(self, payload: TaskPayload) -> Task:
        self._check("create")
        self._counter += 1
        task = Task(id=self._counter, **payload.model_dump())
        self.tasks[task.id] = task
        return task

    async def update(self, task_id: int, payload: TaskPayload) -> Task | None:
        self._check("update", task_id)
        if task_id not in self.tasks:
            return None
        task = Task(id=task_id, **payload.model_dump())
        self.tasks[task_id] = task
        return task

    async def delete(self, task_id: int) -> bool:
        self._check("delete", task_id)
        return self.tasks.pop(task_id, None) is not None


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test Task API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("CORS_ORIGIN", "http://localhost:3000")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
def stub_store() -> StubTaskStore:
    return StubTaskStore()


def _client(store: StubTaskStore, **overrides: object) -> TestClient:
    settings = ApiSettings(**overrides)  # type: ignore[arg-type]
    return TestClient(create_app(store=store, settings=settings))


@pytest.fixture
def api_client(env_settings: None, stub_store: StubTaskStore):
    """FastAPI test client wired to the stub task store."""
    return _client(stub_store), stub_store


@pytest.fixture
def strict_api_client(env_settings: None, stub_store: StubTaskStore):
    """Test client that surfaces store failures instead of reporting 404."""
    return _client(stub_store, COLLAPSE_STORE_ERRORS=False), stub_store
