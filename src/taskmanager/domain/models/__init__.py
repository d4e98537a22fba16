from src.taskmanager.domain.models.payloads import TaskPayload
from src.taskmanager.domain.models.task import Task

__all__ = [
    "Task",
    "TaskPayload",
]
