"""Book ORM — persists the single Book entity.

Invariants:
    - isbn is the text primary key, supplied by the caller, never regenerated
    - every column is non-nullable; pages and year are integers

Design Decisions:
    - Text columns over sized String: the API imposes no length limits
    - No timestamps or version column: no soft-delete, no versioning
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from books_api.db.base import Base


class Book(Base):
    """A book record keyed by ISBN."""
    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(Text, primary_key=True)
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
