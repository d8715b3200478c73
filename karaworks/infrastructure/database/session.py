"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from karaworks.core.config import get_settings
from karaworks.infrastructure.database.base import Base

_engine: AsyncEngine | None = None
SessionFactory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str | None = None, **overrides: Any) -> AsyncEngine:
    """Create an engine for ``url`` (defaults to the configured database).

    SQLite connections enforce foreign keys and wait on locks held by a
    concurrent writer instead of failing immediately.
    """
    settings = get_settings()
    url = url or settings.database_url
    engine_kwargs: dict[str, Any] = {"echo": settings.database.echo or settings.debug}

    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        engine_kwargs["connect_args"] = {"timeout": settings.database.sqlite_busy_timeout}
    else:
        if settings.database.pool_size is not None:
            engine_kwargs["pool_size"] = settings.database.pool_size
        if settings.database.max_overflow is not None:
            engine_kwargs["max_overflow"] = settings.database.max_overflow
    engine_kwargs.update(overrides)

    engine = create_async_engine(url, **engine_kwargs)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def session_factory_for(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


def get_engine() -> AsyncEngine:
    global _engine, SessionFactory
    if _engine is None:
        _engine = build_engine()
        SessionFactory = session_factory_for(_engine)
    return _engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session; commit on success, roll back on error."""
    if SessionFactory is None:
        get_engine()

    assert SessionFactory is not None
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables for local development; deployments run alembic."""
    from karaworks.db import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
