"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite file database with the tables created from
SQLModel metadata. Uses polyfactory for test data generation.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.portfolio.core.config import Settings
from src.portfolio.core.db import create_engine
from src.portfolio.main import create_app


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create test database engine with all tables."""
    test_engine = create_engine(settings)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for seeding and inspecting records.

    Tests must call `await session.commit()` to persist changes.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(
    settings: Settings,
    engine: AsyncEngine,
    chat_http_client: httpx.AsyncClient,
) -> AsyncGenerator[AsyncClient]:
    """Create test client on an app wired to the test store and fake chat API."""
    app = create_app(settings=settings, engine=engine, http_client=chat_http_client)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
