"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - StaticPool: one shared connection, so every session sees the same :memory: database
    - Seed books inserted through SqlBookRepository, the same path POST uses
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from books_api.db.base import Base
from books_api.infrastructure.database import get_db, DatabaseSessionManager
import books_api.infrastructure.database as db_module
from books_api.main import app
from books_api.services.book_repository import SqlBookRepository
from tests.services.book_samples import GULAG, ODYSSEY


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def repo(test_db):
    return SqlBookRepository(test_db)


@pytest.fixture
async def seed_books(test_session_factory):
    """Insert the two reference books."""
    async with test_session_factory() as session:
        seeder = SqlBookRepository(session)
        await seeder.create(dict(GULAG))
        await seeder.create(dict(ODYSSEY))


def _install_overrides(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager
    return original_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = _install_overrides(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def lenient_client(test_engine, test_session_factory):
    """Like `client`, but unhandled app exceptions become 500 responses instead of re-raising."""
    original_manager = _install_overrides(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
