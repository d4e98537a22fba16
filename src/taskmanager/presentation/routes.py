from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import APIRouter, Path, Response, status

from src.taskmanager.application.services import TaskService
from src.taskmanager.domain.exceptions import TaskStoreError
from src.taskmanager.domain.models import Task, TaskPayload

logger = logging.getLogger(__name__)

# Ids are stored as signed 64-bit integers.
TASK_ID_MIN = -(2**63)
TASK_ID_MAX = 2**63 - 1

TaskId = Annotated[int, Path(description="Task id", ge=TASK_ID_MIN, le=TASK_ID_MAX)]

_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {"description": "Task not found. The body is empty."},
}


@dataclass(frozen=True)
class RouteSpec:
    """One row of the route table: HTTP binding plus documentation metadata."""

    method: str
    path: str
    endpoint: str
    summary: str
    description: str
    status_code: int = status.HTTP_200_OK
    response_model: Any = None
    responses: dict[int | str, dict[str, Any]] = field(default_factory=dict)


TASK_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(
        method="GET",
        path="",
        endpoint="list_tasks",
        summary="Get all tasks",
        description="Retrieves a list of all tasks",
        response_model=list[Task],
    ),
    RouteSpec(
        method="GET",
        path="/{task_id}",
        endpoint="get_task",
        summary="Get task by ID",
        description="Retrieves a specific task by its ID",
        response_model=Task,
        responses=_NOT_FOUND,
    ),
    RouteSpec(
        method="POST",
        path="",
        endpoint="create_task",
        summary="Create new task",
        description="Creates a new task",
        status_code=status.HTTP_201_CREATED,
        response_model=Task,
    ),
    RouteSpec(
        method="PUT",
        path="/{task_id}",
        endpoint="update_task",
        summary="Update task",
        description="Updates an existing task by its ID",
        response_model=Task,
        responses=_NOT_FOUND,
    ),
    RouteSpec(
        method="DELETE",
        path="/{task_id}",
        endpoint="delete_task",
        summary="Delete task",
        description="Deletes a task by its ID",
        responses={200: {"description": "Task deleted. The body is empty."}, **_NOT_FOUND},
    ),
)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


class TaskResourceHandler:
    """
    Translates HTTP requests into task service calls.

    Absence maps to an empty 404. When ``collapse_store_errors`` is set, store
    failures during update and delete are reported the same way.
    """

    def __init__(self, service: TaskService, *, collapse_store_errors: bool = True) -> None:
        self._service = service
        self._collapse_store_errors = collapse_store_errors

    async def list_tasks(self) -> list[Task]:
        return await self._service.list_tasks()

    async def get_task(self, task_id: TaskId) -> Task | Response:
        task = await self._service.get_task(task_id)
        if task is None:
            return _not_found()
        return task

    async def create_task(self, payload: TaskPayload) -> Task:
        return await self._service.create_task(payload)

    async def update_task(self, task_id: TaskId, payload: TaskPayload) -> Task | Response:
        try:
            task = await self._service.update_task(task_id, payload)
        except TaskStoreError:
            if not self._collapse_store_errors:
                raise
            logger.warning(
                "Store failure during update reported as not found",
                exc_info=True,
                extra={"task_id": task_id},
            )
            return _not_found()
        if task is None:
            return _not_found()
        return task

    async def delete_task(self, task_id: TaskId) -> Response:
        try:
            deleted = await self._service.delete_task(task_id)
        except TaskStoreError:
            if not self._collapse_store_errors:
                raise
            logger.warning(
                "Store failure during delete reported as not found",
                exc_info=True,
                extra={"task_id": task_id},
            )
            return _not_found()
        if not deleted:
            return _not_found()
        return Response(status_code=status.HTTP_200_OK)


def build_task_router(
    handler: TaskResourceHandler,
    *,
    prefix: str = "/api/tasks",
    routes: tuple[RouteSpec, ...] = TASK_ROUTES,
) -> APIRouter:
    """Register every row of ``routes`` on a new router bound to ``handler``."""
    router = APIRouter(prefix=prefix, tags=["Task Controller"])
    for route in routes:
        router.add_api_route(
            route.path,
            getattr(handler, route.endpoint),
            methods=[route.method],
            response_model=route.response_model,
            status_code=route.status_code,
            summary=route.summary,
            description=route.description,
            responses=route.responses,
            name=route.endpoint,
        )
    return router
