import asyncio
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from src.taskmanager.domain.models import TaskPayload
from src.taskmanager.infrastructure.sql.orm import Base, SqlOrm
from src.taskmanager.infrastructure.sql.repositories import SqlTaskStore

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _alembic_config() -> Config:
    # No ini file, so env.py leaves the logging configuration alone.
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config


async def _round_trip(database_url: str) -> None:
    orm = SqlOrm(database_url)
    store = SqlTaskStore(orm)
    try:
        first = await store.create(TaskPayload(title="A", description="d"))
        second = await store.create(TaskPayload(title="B", completed=True))
        assert second.id > first.id
        assert await store.find_by_id(first.id) == first

        updated = await store.update(second.id, TaskPayload(title="C"))
        assert updated is not None
        assert updated.completed is False
        assert await store.delete(first.id) is True
        assert await store.list_all() == [updated]
    finally:
        await orm.dispose()


def test_upgrade_head_builds_schema_usable_by_store(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(_alembic_config(), "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        columns = {column["name"] for column in inspect(engine).get_columns("tasks")}
    finally:
        engine.dispose()
    assert columns == set(Base.metadata.tables["tasks"].columns.keys())

    asyncio.run(_round_trip(f"sqlite+aiosqlite:///{db_path}"))


def test_downgrade_drops_tasks_table(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    config = _alembic_config()

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert "tasks" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
