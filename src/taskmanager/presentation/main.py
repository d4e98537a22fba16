from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import DatabaseSettings, get_database_settings
from src.setup.logging_config import configure_logging
from src.taskmanager.application.services import TaskService
from src.taskmanager.domain.exceptions import TaskStoreError
from src.taskmanager.domain.repositories import TaskStore
from src.taskmanager.infrastructure.sql.orm import SqlOrm
from src.taskmanager.presentation.routes import TaskResourceHandler, build_task_router

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [{"name": "Task Controller", "description": "APIs for managing tasks"}]


async def _task_store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Task store failure",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"detail": "Task store failure."})


def create_app(
    store: TaskStore | None = None,
    settings: ApiSettings | None = None,
    db_settings: DatabaseSettings | None = None,
) -> FastAPI:
    """
    Build the API application.

    When ``store`` is omitted the store is resolved from the DI container
    configured by ``configure_di``; otherwise it is used as given and no
    database resources are owned by the app.
    """
    settings = settings or get_api_settings()
    db_settings = db_settings or get_database_settings()
    configure_logging(settings.LOG_LEVEL)

    orm: SqlOrm | None = None
    if store is None:
        configure_di(settings, db_settings)
        store = inject.instance(TaskStore)
        if settings.TASK_STORE_BACKEND == "sql":
            orm = inject.instance(SqlOrm)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if orm is not None and db_settings.DB_CREATE_SCHEMA:
            await orm.create_schema()
            logger.info("Database schema ensured")
        try:
            yield
        finally:
            if orm is not None:
                await orm.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        contact={"name": settings.CONTACT_NAME, "email": settings.CONTACT_EMAIL},
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TaskStoreError, _task_store_error_handler)

    handler = TaskResourceHandler(
        TaskService(store),
        collapse_store_errors=settings.COLLAPSE_STORE_ERRORS,
    )
    app.include_router(build_task_router(handler, prefix=settings.API_PREFIX))
    logger.info(
        "Task API configured",
        extra={"backend": settings.TASK_STORE_BACKEND, "prefix": settings.API_PREFIX},
    )
    return app
