import inject

from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.db_config import DatabaseSettings, get_database_settings
from src.taskmanager.domain.repositories import TaskStore
from src.taskmanager.infrastructure.memory.repositories import InMemoryTaskStore
from src.taskmanager.infrastructure.sql.orm import SqlOrm
from src.taskmanager.infrastructure.sql.repositories import SqlTaskStore


def configure_di(
    api_settings: ApiSettings | None = None,
    db_settings: DatabaseSettings | None = None,
) -> None:
    """Bind the task store selected by ``TASK_STORE_BACKEND``."""
    api_settings = api_settings or get_api_settings()
    db_settings = db_settings or get_database_settings()

    def _config(binder: inject.Binder) -> None:
        if api_settings.TASK_STORE_BACKEND == "memory":
            binder.bind(TaskStore, InMemoryTaskStore())
            return
        orm = SqlOrm(db_settings.DATABASE_URL, echo=db_settings.DB_ECHO)
        binder.bind(SqlOrm, orm)
        binder.bind(TaskStore, SqlTaskStore(orm))

    inject.clear_and_configure(_config, bind_in_runtime=False)
