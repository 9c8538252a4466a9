"""
shop_orders.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from settings (enforcing foreign keys on SQLite).
- Create the async sessionmaker with safe defaults.
- Provide a session scope helper for callers that own the unit of work.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shop_orders.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    url = make_url(settings.database_url)
    kwargs: dict[str, Any] = {"echo": settings.sql_echo, "pool_pre_ping": True}
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # In-memory SQLite lives inside one connection; every session must share it.
        kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Unit-of-work scope: commit on success, roll back on error.
    Repositories only flush; this is where their writes become durable.
    """

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# --- Module Notes -----------------------------------------------------------
# `session_scope` is the only place in the package that commits.
