"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Rows cross the boundary as plain dicts keyed by BOOK_FIELDS
"""

from typing import Protocol

from books_api.core.domain_types import Isbn


class BookRepository(Protocol):
    """Contract for book persistence — implemented by shell."""
    async def list_all(self) -> list[dict]: ...
    async def get_by_isbn(self, isbn: Isbn) -> dict: ...
    async def create(self, data: dict) -> dict: ...
    async def update(self, isbn: Isbn, data: dict) -> dict: ...
    async def remove(self, isbn: Isbn) -> None: ...
