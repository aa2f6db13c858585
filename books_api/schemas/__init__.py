"""Pydantic Schemas — typed request records and response shapes.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
