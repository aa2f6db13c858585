"""Book Repository — CRUD against the books table, one statement per operation.

Invariants:
    - Every operation is a single SQL statement touching at most one row (list excepted)
    - Writes use RETURNING so the stored row is echoed without a second query
    - A write that matched no row raises BookNotFoundError; nothing is committed
    - SQLAlchemy failures are rolled back and re-raised as StorageError

Design Decisions:
    - Core insert/update/delete over ORM add/refresh: one round trip, no identity-map state
    - Session injected per request (no ambient singleton) — implements core BookRepository
    - Listing ordered by isbn: deterministic enumeration without an extra column
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from books_api.core.domain_types import Isbn
from books_api.core.errors import BookNotFoundError, StorageError
from books_api.models.book import Book

logger = logging.getLogger(__name__)

_COLUMNS = (
    Book.isbn, Book.amazon_url, Book.author, Book.language,
    Book.pages, Book.publisher, Book.title, Book.year,
)


class SqlBookRepository:
    """Book persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[dict]:
        async with self._storage("list"):
            result = await self._db.execute(
                select(*_COLUMNS).order_by(Book.isbn),
            )
            return [dict(row) for row in result.mappings().all()]

    async def get_by_isbn(self, isbn: Isbn) -> dict:
        async with self._storage("get"):
            result = await self._db.execute(
                select(*_COLUMNS).where(Book.isbn == isbn),
            )
            row = result.mappings().one_or_none()
        if row is None:
            raise BookNotFoundError(isbn)
        return dict(row)

    async def create(self, data: dict) -> dict:
        async with self._storage("create"):
            result = await self._db.execute(
                insert(Book).values(**data).returning(*_COLUMNS),
            )
            row = dict(result.mappings().one())
            await self._db.commit()
        logger.info("Book created", extra={"isbn": row["isbn"]})
        return row

    async def update(self, isbn: Isbn, data: dict) -> dict:
        """Replace every non-key field. An isbn key in `data` is ignored."""
        values = {k: v for k, v in data.items() if k != "isbn"}
        async with self._storage("update"):
            result = await self._db.execute(
                update(Book)
                .where(Book.isbn == isbn)
                .values(**values)
                .returning(*_COLUMNS),
            )
            row = result.mappings().one_or_none()
            if row is None:
                await self._db.rollback()
                raise BookNotFoundError(isbn)
            row = dict(row)
            await self._db.commit()
        logger.info("Book updated", extra={"isbn": isbn})
        return row

    async def remove(self, isbn: Isbn) -> None:
        async with self._storage("delete"):
            result = await self._db.execute(
                delete(Book).where(Book.isbn == isbn).returning(Book.isbn),
            )
            if result.scalar_one_or_none() is None:
                await self._db.rollback()
                raise BookNotFoundError(isbn)
            await self._db.commit()
        logger.info("Book deleted", extra={"isbn": isbn})

    @asynccontextmanager
    async def _storage(self, operation: str) -> AsyncIterator[None]:
        """Map SQLAlchemy failures to StorageError after rolling back."""
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            message = str(getattr(e, "orig", None) or e)
            logger.error(
                f"Book {operation} failed: {message}",
                extra={"error_code": "STORAGE_ERROR"},
            )
            raise StorageError(message, operation) from e
