"""
Irenet Backend — Database Session Management
============================================

What:  Async SQLAlchemy engine, session factory, declarative base, and the
       FastAPI session dependency.
How:   One engine (and therefore one connection pool) per process, created
       from settings at import time and disposed by the application lifespan.
       Each request gets its own session; the dependency commits when the
       handler returns normally and rolls back when it raises.

Transaction scope:
    Everything a handler does on its session is a single transaction. Match
    creation relies on this: the match insert and both status updates are
    committed together or not at all. The commit completes before the
    response is sent, so a client never sees success for an uncommitted
    write.

SQLite:
    Used by the test suite and for local experiments. SQLite has no server
    pool to size, so a SQLite URL gets a single shared connection
    (StaticPool) instead of the sized queue pool, which also keeps an
    in-memory database alive across sessions.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from irenet.config import settings
from irenet.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Pool options for the configured URL."""
    if settings.is_sqlite:
        return {"poolclass": StaticPool}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": 3600,
    }


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.sqlalchemy_url,
    echo=settings.log_level == "DEBUG",
    **_engine_options(),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: generated ids stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Shares one metadata object between the models, `create_tables()` and
    Alembic autogeneration.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Column name → value for every mapped column (the `t.*` projection)."""
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back the transaction and re-raises
        4. On success: commits; a failed commit is rolled back and raised
           as DatabaseError carrying the driver's message
        5. Always: closes the session (returns the connection to the pool)

    Routes declare it with scope="function" so steps 3-5 run before the
    response is sent; under the default request scope FastAPI runs them
    after the client already has its 200.

    Example usage in a route:
        @router.get("/users")
        async def list_users(db: AsyncSession = Depends(get_db_session, scope="function")):
            ...
    """
    async with async_session_factory() as session:
        try:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                error = DatabaseError.from_sqlalchemy(e, "commit")
                logger.error("Commit failed: %s", error.message)
                raise error from e
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """Creates any missing tables. Used at startup when DB_CREATE_TABLES is set."""
    # Registers every model with Base.metadata
    import irenet.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the application lifespan on shutdown."""
    await engine.dispose()
