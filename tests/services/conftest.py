"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine (readiness probe uses it)
    - One active API key ("test-key") and one inactive key are seeded

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      in a test sees the same tables
    - App built with create_app(): no module-level app state leaks across tests
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from reviews_api.config import Settings
from reviews_api.db.base import Base
from reviews_api.infrastructure.database import DatabaseSessionManager, get_db
from reviews_api.main import create_app
from reviews_api.models.api_key import ApiKey
import reviews_api.models  # noqa: F401

API_KEY = "test-key"
INACTIVE_API_KEY = "revoked-key"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
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
async def seed_api_keys(test_db):
    test_db.add_all([
        ApiKey(api_key=API_KEY, is_active=True, user_id="user-1"),
        ApiKey(api_key=INACTIVE_API_KEY, is_active=False, user_id="user-2"),
    ])
    await test_db.commit()


@pytest.fixture
def app():
    return create_app(Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    ))


@pytest.fixture
async def client(app, test_engine, test_session_factory, seed_api_keys):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}


@pytest.fixture
async def create_review(client, auth_headers):
    """POST a review and return its id."""
    async def _create(**fields) -> int:
        body = {"product_id": 5, "user_name": "Alice", "rating": 4}
        body.update(fields)
        res = await client.post("/api/reviews", json=body, headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()["id"]
    return _create
