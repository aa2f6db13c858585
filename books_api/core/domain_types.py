"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Isbn wraps str — the primary key of a book, immutable after creation
    - JSON-Schema primitive names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: .value is the exact name used in violation messages
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Isbn = NewType("Isbn", str)


# ─── Enums ───────────────────────────────────────────────────────

class JsonType(str, Enum):
    """JSON-Schema primitive types used by the book schema."""
    OBJECT = "object"
    STRING = "string"
    INTEGER = "integer"


# ─── Constants ───────────────────────────────────────────────────

BOOK_FIELDS: tuple[str, ...] = (
    "isbn", "amazon_url", "author", "language",
    "pages", "publisher", "title", "year",
)
BOOK_DELETED_MESSAGE = "Book deleted"
