from __future__ import annotations

from typing import Protocol

from src.taskmanager.domain.models.payloads import TaskPayload
from src.taskmanager.domain.models.task import Task


class TaskStore(Protocol):
    """Persistence contract for tasks.

    Absence is reported through return values. Storage faults raise
    ``TaskStoreError``.
    """

    async def list_all(self) -> list[Task]:
        """Return every stored task."""

    async def find_by_id(self, task_id: int) -> Task | None:
        """Return the task identified by ``task_id`` or ``None``."""

    async def create(self, payload: TaskPayload) -> Task:
        """Persist a new task, assigning its id."""

    async def update(self, task_id: int, payload: TaskPayload) -> Task | None:
        """Replace the mutable fields of ``task_id``; ``None`` when it does not exist."""

    async def delete(self, task_id: int) -> bool:
        """Remove ``task_id``; ``False`` when it does not exist."""
