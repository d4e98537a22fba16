from __future__ import annotations

import asyncio

from src.taskmanager.domain.models.payloads import TaskPayload
from src.taskmanager.domain.models.task import Task
from src.taskmanager.domain.repositories import TaskStore


class InMemoryTaskStore(TaskStore):
    """Process-local task storage. Contents are lost on restart."""

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._counter = 0
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Task]:
        return [task.model_copy() for task in self._tasks.values()]

    async def find_by_id(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def create(self, payload: TaskPayload) -> Task:
        async with self._lock:
            self._counter += 1
            task = Task(id=self._counter, **payload.model_dump())
            self._tasks[task.id] = task
        return task.model_copy()

    async def update(self, task_id: int, payload: TaskPayload) -> Task | None:
        async with self._lock:
            if task_id not in self._tasks:
                return None
            task = Task(id=task_id, **payload.model_dump())
            self._tasks[task_id] = task
        return task.model_copy()

    async def delete(self, task_id: int) -> bool:
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None
