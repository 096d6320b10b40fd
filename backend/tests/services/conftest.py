"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - app.state.link_cache is a fresh ResolutionCache per test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Lifespan is not run by ASGITransport, so the fixture installs the cache itself
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import golinks.infrastructure.database as db_module
import golinks.models  # noqa: F401
from golinks.core.resolution_cache import ResolutionCache
from golinks.db.base import Base
from golinks.infrastructure.database import DatabaseSessionManager, get_db
from golinks.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
def cache():
    return ResolutionCache()


@pytest.fixture
async def client(test_engine, test_session_factory, cache):
    """FastAPI test client with DB dependency and cache installed."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.link_cache = cache

    # Patch db_manager for the readiness probe
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.link_cache = None
    db_module.db_manager = original_manager
