"""Book Schema Validation — checks raw JSON bodies against the fixed book contract.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return an ordered list of violation messages; empty list means valid
    - Order: body type, then property types (schema order), then required (schema order)
    - Unknown extra properties are never a violation

Design Decisions:
    - Declarative JSON-Schema-shaped dicts over Pydantic errors: the message strings
      are part of the public API and must match exactly (ADR: client compatibility)
    - bool is rejected as integer even though it subclasses int in Python
"""

from typing import Any

from books_api.core.domain_types import JsonType


BOOK_SCHEMA: dict = {
    "type": JsonType.OBJECT,
    "properties": {
        "isbn": {"type": JsonType.STRING},
        "amazon_url": {"type": JsonType.STRING},
        "author": {"type": JsonType.STRING},
        "language": {"type": JsonType.STRING},
        "pages": {"type": JsonType.INTEGER},
        "publisher": {"type": JsonType.STRING},
        "title": {"type": JsonType.STRING},
        "year": {"type": JsonType.INTEGER},
    },
    "required": [
        "isbn", "amazon_url", "author", "language",
        "pages", "publisher", "title", "year",
    ],
}


def without_property(schema: dict, name: str) -> dict:
    """Derive a schema that neither declares nor requires `name`."""
    return {
        "type": schema["type"],
        "properties": {
            k: v for k, v in schema["properties"].items() if k != name
        },
        "required": [r for r in schema["required"] if r != name],
    }


# PUT bodies: the ISBN comes from the path.
BOOK_UPDATE_SCHEMA: dict = without_property(BOOK_SCHEMA, "isbn")


def is_json_type(value: Any, json_type: JsonType) -> bool:
    """Whether a decoded JSON value matches a JSON-Schema primitive type."""
    if json_type is JsonType.OBJECT:
        return isinstance(value, dict)
    if json_type is JsonType.STRING:
        return isinstance(value, str)
    if json_type is JsonType.INTEGER:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, float) and value.is_integer()
    raise ValueError(f"Unsupported schema type: {json_type}")


def validate_instance(instance: Any, schema: dict) -> list[str]:
    """Validate a decoded JSON body. Returns violations in reporting order."""
    if not is_json_type(instance, schema["type"]):
        return [type_violation(None, schema["type"])]

    violations = []
    for name, rule in schema["properties"].items():
        if name in instance and not is_json_type(instance[name], rule["type"]):
            violations.append(type_violation(name, rule["type"]))
    for name in schema["required"]:
        if name not in instance:
            violations.append(required_violation(name))
    return violations


def validate_book(instance: Any) -> list[str]:
    """Validate a POST /books body."""
    return validate_instance(instance, BOOK_SCHEMA)


def validate_book_update(instance: Any) -> list[str]:
    """Validate a PUT /books/{isbn} body."""
    return validate_instance(instance, BOOK_UPDATE_SCHEMA)


# --- Message formatting -------------------------------------------------------

def type_violation(field: str | None, json_type: JsonType) -> str:
    path = "instance" if field is None else f"instance.{field}"
    return f"{path} is not of a type(s) {json_type.value}"


def required_violation(field: str) -> str:
    return f'instance requires property "{field}"'
