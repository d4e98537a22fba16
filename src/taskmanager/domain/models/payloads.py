from pydantic import BaseModel, ConfigDict, Field


class TaskPayload(BaseModel):
    """Mutable task fields as sent by clients. Any ``id`` in the body is ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=255, description="Short task title.")
    description: str | None = Field(default=None, description="Free-form task details.")
    completed: bool = Field(default=False, description="Whether the task is done.")
