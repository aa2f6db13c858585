"""Books API Package — CRUD over book records keyed by ISBN.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
