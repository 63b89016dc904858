"""
Customer API — Database Session Management
===========================================

What:  Async SQLAlchemy engine, session factory, schema bootstrap and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that rolls back on error and always closes the session.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    Server databases (PostgreSQL):
        pool_size / max_overflow / pool_pre_ping come from settings,
        pool_recycle=3600 retires long-lived connections.
    SQLite (local runs, tests):
        NullPool — each session opens its own connection, so no pooled
        connection outlives the event loop that created it.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from customer_api.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool arguments for the configured backend."""
    options: Dict[str, Any] = {
        # Echo SQL only in DEBUG; it is very noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if settings.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, so a created
# customer can be serialized into the 201 response without another query
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata, which create_schema() uses to create
    any missing tables at startup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the service commits its own writes)
        3. On error: rolls back the transaction (discards changes)
        4. Always: closes the session (returns connection to pool)

    Raises:
        Any database exceptions are propagated to the global error handler,
        which returns appropriate HTTP status codes.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema() -> None:
    """
    What:  Creates every table registered on Base.metadata that does not exist yet.
    When:  Called once during application startup, before serving traffic.
    How:   metadata.create_all with checkfirst semantics; safe to run repeatedly.
           There is no migration versioning: existing tables are left untouched.
    """
    # Registers the customers table on Base.metadata
    from customer_api.models import customer  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
