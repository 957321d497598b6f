"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - The app receives its session manager explicitly (no global patching)
    - unreachable_client points at a database file that cannot be opened

Design Decisions:
    - SQLite in-memory with StaticPool: the app and test_db share one connection,
      so rows committed by a request are visible to assertions
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import NullPool, StaticPool
from httpx import ASGITransport, AsyncClient

from newsletter.config import Settings
from newsletter.db.base import Base
from newsletter.infrastructure.database import DatabaseSessionManager
from newsletter.main import create_app
import newsletter.models  # noqa: F401


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, settings):
    app = create_app(settings, DatabaseSessionManager(test_engine))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def unreachable_manager(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'newsletter.db'}",
        poolclass=NullPool,
    )
    yield DatabaseSessionManager(engine)
    await engine.dispose()


@pytest.fixture
async def unreachable_client(unreachable_manager, settings):
    app = create_app(settings, unreachable_manager)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
