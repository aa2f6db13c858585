"""SqlBookRepository — single-statement CRUD against the books table.

Invariants:
    - create then get_by_isbn returns an equal dict
    - update/remove/get on unknown ISBN raise BookNotFoundError
    - duplicate ISBN raises StorageError and leaves the session usable
"""

import pytest

from books_api.core.errors import BookNotFoundError, StorageError
from tests.services.book_samples import GULAG, ODYSSEY, ODYSSEY_REVISED, PLATO


async def test_create_then_get_round_trips(repo):
    created = await repo.create(dict(PLATO))
    assert created == PLATO
    assert await repo.get_by_isbn(PLATO["isbn"]) == PLATO


async def test_list_all_ordered_by_isbn(repo):
    await repo.create(dict(ODYSSEY))
    await repo.create(dict(GULAG))
    await repo.create(dict(PLATO))
    books = await repo.list_all()
    assert [b["isbn"] for b in books] == [
        "0872203492", "1843430851", "9780140268867",
    ]


async def test_get_missing_raises_not_found(repo):
    with pytest.raises(BookNotFoundError) as exc_info:
        await repo.get_by_isbn("123")
    assert exc_info.value.isbn == "123"
    assert exc_info.value.http_status == 404


async def test_update_replaces_non_key_fields(repo):
    await repo.create(dict(ODYSSEY))
    updated = await repo.update("9780140268867", dict(ODYSSEY_REVISED))
    assert updated == {"isbn": "9780140268867", **ODYSSEY_REVISED}


async def test_update_never_changes_isbn(repo):
    await repo.create(dict(ODYSSEY))
    updated = await repo.update(
        "9780140268867", {**ODYSSEY_REVISED, "isbn": "other"},
    )
    assert updated["isbn"] == "9780140268867"


async def test_update_missing_raises_not_found(repo):
    with pytest.raises(BookNotFoundError):
        await repo.update("123", dict(ODYSSEY_REVISED))


async def test_remove_then_get_raises_not_found(repo):
    await repo.create(dict(GULAG))
    await repo.remove("1843430851")
    with pytest.raises(BookNotFoundError):
        await repo.get_by_isbn("1843430851")


async def test_remove_missing_raises_not_found(repo):
    with pytest.raises(BookNotFoundError):
        await repo.remove("123")


async def test_duplicate_isbn_raises_storage_error(repo):
    await repo.create(dict(GULAG))
    with pytest.raises(StorageError) as exc_info:
        await repo.create(dict(GULAG))
    assert exc_info.value.operation == "create"
    assert exc_info.value.http_status == 500
    # Session rolled back and still usable
    assert await repo.list_all() == [GULAG]
