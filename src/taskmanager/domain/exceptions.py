class TaskStoreError(Exception):
    """Raised when the task store fails to complete an operation."""

    def __init__(self, operation: str, task_id: int | None = None) -> None:
        if task_id is None:
            message = f"Task store failed during '{operation}'."
        else:
            message = f"Task store failed during '{operation}' for task '{task_id}'."
        super().__init__(message)
        self.operation = operation
        self.task_id = task_id
