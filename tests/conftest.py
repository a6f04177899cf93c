"""
Irenet Backend — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at an in-memory SQLite database BEFORE any
       irenet module is imported, so the engine built in irenet.database
       never targets a real server.

Fixtures:
    ├── mock_db_session: AsyncMock standing in for AsyncSession (service unit tests)
    ├── database:        fresh schema on the in-memory engine, dropped afterwards
    └── test_client:     HTTPX AsyncClient routed into the app (needs `database`)
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        async def test_get_user(mock_db_session):
            mock_db_session.execute.return_value.mappings.return_value.one_or_none.return_value = row
            result = await user_service.get_user(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def assign_id(mock_db_session):
    """
    Returns a helper making flush() set a generated primary key on the last
    object passed to session.add(), the way the database would.

    Usage:
        assign_id("user_id", 42)
    """

    def configure(attribute, value):
        async def flush():
            added = mock_db_session.add.call_args[0][0]
            setattr(added, attribute, value)

        mock_db_session.flush = AsyncMock(side_effect=flush)

    return configure


@pytest_asyncio.fixture
async def database():
    """Creates every table on the in-memory engine for one test, then drops them."""
    import irenet.models  # noqa: F401
    from irenet.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    An async HTTP client talking straight to the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    from irenet.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
