import pytest

from src.taskmanager.domain.models import TaskPayload
from src.taskmanager.infrastructure.memory.repositories import InMemoryTaskStore


@pytest.mark.asyncio
async def test_memory_store_crud_cycle() -> None:
    store = InMemoryTaskStore()

    created = await store.create(TaskPayload(title="A"))
    assert created.id == 1
    assert await store.find_by_id(1) == created

    updated = await store.update(1, TaskPayload(title="B", completed=True))
    assert updated is not None
    assert updated.title == "B"
    assert await store.list_all() == [updated]

    assert await store.delete(1) is True
    assert await store.list_all() == []


@pytest.mark.asyncio
async def test_memory_store_reports_absence() -> None:
    store = InMemoryTaskStore()

    assert await store.find_by_id(1) is None
    assert await store.update(1, TaskPayload(title="B")) is None
    assert await store.delete(1) is False


@pytest.mark.asyncio
async def test_memory_store_does_not_reuse_ids() -> None:
    store = InMemoryTaskStore()
    first = await store.create(TaskPayload(title="A"))
    await store.delete(first.id)

    second = await store.create(TaskPayload(title="B"))

    assert second.id == first.id + 1


@pytest.mark.asyncio
async def test_memory_store_returns_copies() -> None:
    store = InMemoryTaskStore()
    created = await store.create(TaskPayload(title="A"))

    created.title = "mutated"

    fetched = await store.find_by_id(created.id)
    assert fetched is not None
    assert fetched.title == "A"
