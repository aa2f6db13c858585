"""Root conftest — shared test configuration."""

import os

# Never reach a real PostgreSQL from the test suite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
