"""Pytest configuration and fixtures for monitor_search.

Repository, service and API tests run against a file-backed SQLite issue
store (sqlite+aiosqlite) created and seeded per test; no server database
is needed. API tests build the app with create_app() after pointing
DATABASE_URL at that store.
"""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from monitor_search.core.config import get_settings
from monitor_search.core.limiter import limiter
from monitor_search.infrastructure.persistence import database
from monitor_search.infrastructure.persistence.database import Base
from monitor_search.main import create_app
from tests.fixtures.issue_store import seed_rows


@pytest.fixture
async def store_url(tmp_path: Path) -> AsyncIterator[str]:
    """Create and seed a SQLite issue store; yield its async URL."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'monitor.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        session.add_all(seed_rows())
        await session.commit()
    await engine.dispose()
    yield url


@pytest.fixture
async def db_session(store_url: str) -> AsyncIterator[AsyncSession]:
    """Read session on the seeded store for repository/service tests."""
    engine = create_async_engine(store_url)
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session
    await engine.dispose()


async def _reset_engine() -> None:
    if database.engine is not None:
        await database.engine.dispose()
    database.engine = None
    database.AsyncSessionLocal = None


@pytest.fixture
async def configured_store(
    store_url: str, monkeypatch: pytest.MonkeyPatch
) -> AsyncIterator[str]:
    """Point the application's DATABASE_URL at the seeded store."""
    monkeypatch.setenv("DATABASE_URL", store_url)
    get_settings.cache_clear()
    await _reset_engine()
    yield store_url
    await _reset_engine()
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against a freshly built FastAPI app (ASGI)."""
    limiter.reset()
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
