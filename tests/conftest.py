"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from decimal import Decimal
from typing import Any

# Must be set before any app imports that trigger Settings validation.
TEST_API_TOKEN = "test-api-token"
TEST_DATABASE_URL = "sqlite+aiosqlite://"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["API_TOKEN"] = TEST_API_TOKEN

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.config import Settings, get_settings  # noqa: E402
from models.base import Base  # noqa: E402
from models.bookmark import Bookmark  # noqa: E402


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """
    Create a fresh in-memory database for each test.

    StaticPool keeps the single in-memory connection alive across sessions, so
    every test starts with an empty bookmarks_table and nothing leaks between tests.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the per-test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def insert_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[list[dict[str, Any]]], Awaitable[None]]:
    """Insert rows straight into bookmarks_table, bypassing the API."""
    async def _insert(rows: list[dict[str, Any]]) -> None:
        async with session_factory() as session:
            session.add_all(
                [Bookmark(**{**row, "rating": Decimal(row["rating"])}) for row in rows],
            )
            await session.commit()

    return _insert


def make_test_settings() -> Settings:
    """Settings used by the app under test, independent of any local .env."""
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        api_token=TEST_API_TOKEN,
    )


@pytest.fixture
async def app_under_test(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[Any]:
    """The FastAPI app with its session and settings dependencies pointed at the test database."""
    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = make_test_settings

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_under_test: Any) -> AsyncGenerator[AsyncClient]:
    """Create a test client that sends the valid bearer token."""
    async with AsyncClient(
        transport=ASGITransport(app=app_under_test),
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_API_TOKEN}"},
    ) as test_client:
        yield test_client


@pytest.fixture
async def anonymous_client(app_under_test: Any) -> AsyncGenerator[AsyncClient]:
    """Create a test client that sends no Authorization header."""
    async with AsyncClient(
        transport=ASGITransport(app=app_under_test),
        base_url="http://test",
    ) as test_client:
        yield test_client
