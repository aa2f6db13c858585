"""Book Schemas — typed records built from bodies that already passed validate_book().

Invariants:
    - BookCreate/BookUpdate are constructed only after core.book_schema reports no violations
    - Extra body properties are dropped here (never persisted, never rejected)
    - BookUpdate has no isbn: the key comes from the path

Design Decisions:
    - Violation messages come from core.book_schema, not Pydantic: the wording is
      part of the public contract and Pydantic's differs
    - Lax mode: an integral float such as 543.0 is coerced to 543
"""

from pydantic import BaseModel, ConfigDict


class BookUpdate(BaseModel):
    """All mutable book fields — full replacement on PUT."""
    model_config = ConfigDict(extra="ignore")

    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookCreate(BookUpdate):
    """Every book field, including the caller-supplied ISBN."""
    isbn: str


class BookResponse(BaseModel):
    """Public representation of a stored book."""
    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookEnvelope(BaseModel):
    book: BookResponse


class BookListEnvelope(BaseModel):
    books: list[BookResponse]


class MessageResponse(BaseModel):
    message: str
