"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - app.state.db_manager points at the test engine (readiness check)
    - Settings overrides are cleared after each test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not used by the store)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from producer_registry.config import Settings, get_settings
from producer_registry.db.base import Base
from producer_registry.infrastructure.database import get_db, DatabaseSessionManager
from producer_registry.main import app
import producer_registry.models  # noqa: F401


@pytest.fixture
def producer_payload():
    return {
        "cpfCnpj": "12345678901",
        "producerName": "Ana",
        "farmName": "Fazenda X",
        "city": "Goiânia",
        "state": "GO",
        "totalArea": 100,
        "cultivableArea": 60,
        "vegetationArea": 30,
        "crops": ["soy"],
    }


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


@pytest.fixture
def override_settings():
    """Swap the Settings seen by route handlers: override_settings(enforce_area_rule=True)."""
    def _apply(**values):
        settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _apply


@pytest.fixture
async def drop_tables(test_engine):
    """Remove the schema so every statement fails with an OperationalError."""
    async def _drop():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    return _drop
