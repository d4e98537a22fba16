from pydantic import Field

from src.taskmanager.domain.models.payloads import TaskPayload


class Task(TaskPayload):
    id: int = Field(description="Unique task identifier assigned by the store.")
