"""Core — pure domain logic for the Books API.

Invariants:
    - No IO, no async, no framework imports (FastAPI, SQLAlchemy stay in the shell)

Design Decisions:
    - Validation, error types and boundary protocols live here so they can be tested without a DB
"""
