"""Error Hierarchy — typed, categorized exceptions for every Books API failure mode.

Invariants:
    - Every error has an http_status (int) and a category (ErrorCategory)
    - to_response() produces the REST envelope {"error": {"message", "status"}}
    - Validation errors carry the ordered violation list as their message

Design Decisions:
    - Single hierarchy with BooksApiError base: one global handler catches all (ADR: uniform error shape)
    - Duplicate ISBN on create is a StorageError, not a 409 — the backend's message is surfaced as-is
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class BooksApiError(Exception):
    """Base exception for all Books API errors."""

    def __init__(
        self,
        message: str | list[str],
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard REST error envelope."""
        return error_envelope(self.message, self.http_status)


def error_envelope(message: str | list[str], status: int) -> dict:
    """Build {"error": {"message", "status"}} for any failure."""
    return {"error": {"message": message, "status": status}}


# ─── Client Errors (400-level) ──────────────────────────────────

class BookValidationError(BooksApiError):
    """Request body violated the book schema. Never persisted."""
    def __init__(self, violations: list[str]):
        super().__init__(list(violations), ErrorCategory.VALIDATION, 400)
        self.violations = list(violations)


class BookNotFoundError(BooksApiError):
    """No row for the given ISBN."""
    def __init__(self, isbn: str):
        super().__init__(
            f"There is no book with an isbn '{isbn}'",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.isbn = isbn


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(BooksApiError):
    """Unclassified backend failure (includes duplicate ISBN on create)."""
    def __init__(self, message: str, operation: str):
        super().__init__(message, ErrorCategory.DATABASE, 500)
        self.operation = operation
