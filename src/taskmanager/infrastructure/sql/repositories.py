from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.taskmanager.domain.exceptions import TaskStoreError
from src.taskmanager.domain.models.payloads import TaskPayload
from src.taskmanager.domain.models.task import Task
from src.taskmanager.domain.repositories import TaskStore
from src.taskmanager.infrastructure.sql.mappers import OrmMapper
from src.taskmanager.infrastructure.sql.orm import SqlOrm, TaskRow

logger = logging.getLogger(__name__)


class SqlTaskStore(TaskStore):
    """Task storage on SQLAlchemy async sessions."""

    def __init__(self, orm: SqlOrm) -> None:
        self._orm = orm

    async def list_all(self) -> list[Task]:
        """Return all tasks ordered by id."""
        try:
            async with self._orm.session_factory() as session:
                result = await session.execute(select(TaskRow).order_by(TaskRow.id))
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise TaskStoreError("list_all") from exc
        return [OrmMapper.to_domain_task(row) for row in rows]

    async def find_by_id(self, task_id: int) -> Task | None:
        try:
            async with self._orm.session_factory() as session:
                task_row = await session.get(TaskRow, task_id)
        except SQLAlchemyError as exc:
            raise TaskStoreError("find_by_id", task_id) from exc
        if task_row is None:
            return None
        return OrmMapper.to_domain_task(task_row)

    async def create(self, payload: TaskPayload) -> Task:
        """Insert a task and return it with the database-assigned id."""
        task_row = OrmMapper.to_task_row(payload)
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    session.add(task_row)
                    # Flush inside the transaction so the id is populated.
                    await session.flush()
        except SQLAlchemyError as exc:
            raise TaskStoreError("create") from exc
        return OrmMapper.to_domain_task(task_row)

    async def update(self, task_id: int, payload: TaskPayload) -> Task | None:
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    task_row = await session.get(TaskRow, task_id)
                    if task_row is None:
                        return None
                    OrmMapper.apply_payload(task_row, payload)
        except SQLAlchemyError as exc:
            raise TaskStoreError("update", task_id) from exc
        return OrmMapper.to_domain_task(task_row)

    async def delete(self, task_id: int) -> bool:
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    task_row = await session.get(TaskRow, task_id)
                    if task_row is None:
                        return False
                    await session.delete(task_row)
        except SQLAlchemyError as exc:
            raise TaskStoreError("delete", task_id) from exc
        logger.debug("Deleted task row", extra={"task_id": task_id})
        return True
