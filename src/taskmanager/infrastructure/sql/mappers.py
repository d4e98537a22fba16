from __future__ import annotations

from src.taskmanager.domain.models.payloads import TaskPayload
from src.taskmanager.domain.models.task import Task
from src.taskmanager.infrastructure.sql.orm import TaskRow


class OrmMapper:
    @staticmethod
    def to_task_row(payload: TaskPayload) -> TaskRow:
        return TaskRow(
            title=payload.title,
            description=payload.description,
            completed=payload.completed,
        )

    @staticmethod
    def apply_payload(row: TaskRow, payload: TaskPayload) -> None:
        row.title = payload.title
        row.description = payload.description
        row.completed = payload.completed

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description,
            completed=row.completed,
        )
