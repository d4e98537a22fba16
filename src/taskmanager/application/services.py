import logging

from src.taskmanager.domain.models import Task, TaskPayload
from src.taskmanager.domain.repositories import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Pass-through over the task store for the HTTP layer."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def list_tasks(self) -> list[Task]:
        return await self._store.list_all()

    async def get_task(self, task_id: int) -> Task | None:
        return await self._store.find_by_id(task_id)

    async def create_task(self, payload: TaskPayload) -> Task:
        task = await self._store.create(payload)
        logger.info("Task created", extra={"task_id": task.id})
        return task

    async def update_task(self, task_id: int, payload: TaskPayload) -> Task | None:
        """
        Replace every mutable field of the task. Returns ``None`` when the task
        does not exist.
        """
        task = await self._store.update(task_id, payload)
        if task is None:
            logger.info("Task update skipped, task missing", extra={"task_id": task_id})
        else:
            logger.info("Task updated", extra={"task_id": task_id})
        return task

    async def delete_task(self, task_id: int) -> bool:
        deleted = await self._store.delete(task_id)
        if deleted:
            logger.info("Task deleted", extra={"task_id": task_id})
        else:
            logger.info("Task delete skipped, task missing", extra={"task_id": task_id})
        return deleted
