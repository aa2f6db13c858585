"""Book Routes — CRUD over /books keyed by ISBN.

Invariants:
    - Write bodies are validated by core.book_schema BEFORE the repository is touched
    - Violations raise BookValidationError (400); unknown ISBNs raise BookNotFoundError (404)
    - Routes never build error bodies themselves — the global handlers own the envelope
    - /books and /books/ are both served (no redirect)

Design Decisions:
    - Body typed Any: FastAPI must not pre-validate, the violation wording is ours
    - Repository built per request from the injected session (dependency injection)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from books_api.core.book_schema import validate_book, validate_book_update
from books_api.core.domain_types import BOOK_DELETED_MESSAGE, Isbn
from books_api.core.errors import BookValidationError
from books_api.core.repository_protocols import BookRepository
from books_api.infrastructure.database import get_db
from books_api.schemas.book import (
    BookCreate, BookEnvelope, BookListEnvelope, BookUpdate, MessageResponse,
)
from books_api.services.book_repository import SqlBookRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


def get_book_repository(
    db: AsyncSession = Depends(get_db),
) -> BookRepository:
    return SqlBookRepository(db)


def _reject_violations(violations: list[str], path: str) -> None:
    if violations:
        logger.warning(
            f"Rejected book payload: {violations[0]}",
            extra={"path": path, "error_code": "VALIDATION_ERROR"},
        )
        raise BookValidationError(violations)


@router.get("", response_model=BookListEnvelope)
@router.get("/", response_model=BookListEnvelope, include_in_schema=False)
async def list_books(repo: BookRepository = Depends(get_book_repository)):
    """List every book."""
    return {"books": await repo.list_all()}


@router.get("/{isbn}", response_model=BookEnvelope)
async def get_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Get one book by ISBN."""
    return {"book": await repo.get_by_isbn(Isbn(isbn))}


@router.post(
    "", response_model=BookEnvelope, status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=BookEnvelope, status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_book(
    payload: Any = Body(None),
    repo: BookRepository = Depends(get_book_repository),
):
    """Validate and insert a new book."""
    _reject_violations(validate_book(payload), "/books")
    book = BookCreate.model_validate(payload)
    return {"book": await repo.create(book.model_dump())}


@router.put("/{isbn}", response_model=BookEnvelope)
async def update_book(
    isbn: str,
    payload: Any = Body(None),
    repo: BookRepository = Depends(get_book_repository),
):
    """Validate and fully replace the non-key fields of a book."""
    _reject_violations(validate_book_update(payload), f"/books/{isbn}")
    book = BookUpdate.model_validate(payload)
    return {"book": await repo.update(Isbn(isbn), book.model_dump())}


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(
    isbn: str, repo: BookRepository = Depends(get_book_repository),
):
    """Delete a book by ISBN."""
    await repo.remove(Isbn(isbn))
    return {"message": BOOK_DELETED_MESSAGE}
