"""Pytest configuration and fixtures shared by service and HTTP tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from karaworks.db import models  # noqa: F401  registers tables on Base.metadata
from karaworks.infrastructure.database import Base, build_engine, session_factory_for
from karaworks.interfaces.http.deps import get_db_session


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine():
    """In-memory database shared by every session of one test."""
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return session_factory_for(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def http_session_factory(tmp_path) -> async_sessionmaker[AsyncSession]:
    """File-backed database for TestClient, which runs each request on its own event loop."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'karaworks-test.db'}", poolclass=NullPool)

    async def _create_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create_schema())
    return session_factory_for(engine)


@pytest.fixture
def client(http_session_factory):
    from karaworks.main import app

    async def _override_db_session():
        async with http_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def run_db(http_session_factory):
    """Run an async callable against the HTTP test database and commit."""

    def _run(func):
        async def _wrapper():
            async with http_session_factory() as session:
                result = await func(session)
                await session.commit()
                return result

        return asyncio.run(_wrapper())

    return _run
