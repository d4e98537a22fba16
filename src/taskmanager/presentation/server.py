import uvicorn

from src.setup.api_config import get_api_settings


def main() -> None:
    settings = get_api_settings()
    uvicorn.run(
        "src.taskmanager.presentation.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
