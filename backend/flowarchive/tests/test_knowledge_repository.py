from __future__ import annotations

from pathlib import Path

import pytest

from ..core.errors import InvalidSortError, KnowledgeNotFoundError, StorageUnavailableError
from ..db.session import create_engine, create_session_factory
from ..models import Knowledge
from ..repositories import KnowledgeRepository, PageRequest, SortOrder


async def create(repository: KnowledgeRepository, title: str, content: str = "body") -> Knowledge:
    return await repository.save(Knowledge(title=title, content=content))


async def test_insert_assigns_id_and_equal_timestamps(repository: KnowledgeRepository) -> None:
    saved = await create(repository, "First")

    assert saved.id is not None
    assert saved.created_at == saved.updated_at


async def test_update_refreshes_updated_at_only(repository: KnowledgeRepository) -> None:
    saved = await create(repository, "Draft", "old")
    created_at = saved.created_at

    saved.title = "Final"
    saved.content = "new"
    updated = await repository.save(saved)

    assert updated.id == saved.id
    assert updated.title == "Final"
    assert updated.content == "new"
    assert updated.created_at == created_at
    assert updated.updated_at > created_at


async def test_save_with_unknown_id_raises_not_found(repository: KnowledgeRepository) -> None:
    with pytest.raises(KnowledgeNotFoundError):
        await repository.save(Knowledge(id=404, title="ghost", content=""))


async def test_get_by_id_returns_none_when_absent(repository: KnowledgeRepository) -> None:
    assert await repository.get_by_id(1) is None
    assert await repository.get_by_id(-5) is None


async def test_delete_removes_row(repository: KnowledgeRepository) -> None:
    saved = await create(repository, "Short lived")

    await repository.delete(saved)

    assert await repository.get_by_id(saved.id) is None
    assert await repository.count() == 0


async def test_ids_are_not_reused_after_delete(repository: KnowledgeRepository) -> None:
    await create(repository, "one")
    second = await create(repository, "two")
    await repository.delete(second)

    third = await create(repository, "three")

    assert third.id == second.id + 1


async def test_list_defaults_to_newest_first(repository: KnowledgeRepository) -> None:
    for index in range(8):
        await create(repository, f"Article {index}")

    items, total = await repository.list()

    assert total == 8
    assert [item.title for item in items] == [f"Article {index}" for index in range(7, 1, -1)]


async def test_list_windows_and_sorts(repository: KnowledgeRepository) -> None:
    for title in ["charlie", "alpha", "bravo", "delta"]:
        await create(repository, title)

    request = PageRequest(page=1, size=3, orders=(SortOrder("title", "asc"),))
    items, total = await repository.list(request)

    assert total == 4
    assert [item.title for item in items] == ["delta"]


async def test_list_past_the_end_is_empty(repository: KnowledgeRepository) -> None:
    await create(repository, "only")

    items, total = await repository.list(PageRequest(page=5, size=6))

    assert items == []
    assert total == 1


async def test_list_rejects_unknown_sort_field(repository: KnowledgeRepository) -> None:
    with pytest.raises(InvalidSortError):
        await repository.list(PageRequest(orders=(SortOrder("owner"),)))


async def test_unreachable_store_raises_storage_error(tmp_path: Path) -> None:
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'knowledge.db'}")
    repository = KnowledgeRepository(create_session_factory(engine))
    try:
        with pytest.raises(StorageUnavailableError):
            await repository.save(Knowledge(title="x", content="y"))
    finally:
        await engine.dispose()


async def test_identifiers_beyond_64_bits_are_absent(repository: KnowledgeRepository) -> None:
    huge = 10**20

    assert await repository.get_by_id(huge) is None
    assert await repository.get_by_id(-huge) is None
    with pytest.raises(KnowledgeNotFoundError):
        await repository.save(Knowledge(id=huge, title="ghost", content=""))
