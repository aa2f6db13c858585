"""Infrastructure — database session management and logging setup.

Invariants:
    - Only module allowed to create engines or touch root logging handlers
"""
