from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "Task Manager API"
    APP_VERSION: str = "1.0"
    APP_DESCRIPTION: str = "API for managing tasks"
    CONTACT_NAME: str = "Task Manager Team"
    CONTACT_EMAIL: str = "support@taskmanager.com"
    API_PREFIX: str = "/api/tasks"
    CORS_ORIGIN: str = "http://localhost:3000"
    # Update/delete report store failures as 404 when enabled.
    COLLAPSE_STORE_ERRORS: bool = True
    TASK_STORE_BACKEND: Literal["sql", "memory"] = "sql"
    HOST: str = "0.0.0.0"
    PORT: int = 8081
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_api_settings() -> ApiSettings:
    return ApiSettings()  # type: ignore[call-arg]
