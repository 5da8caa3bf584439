"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - get_db and get_view_cache are overridden on the app for route tests
    - db_manager is patched so code reaching it directly sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-only behaviour
      (uuid casts, FK enforcement) is covered with failing-session mocks instead
    - Minimum bcrypt cost for seeded users keeps login tests fast
"""

import os

# Ensure tests never reach a real database or reuse a production secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret-not-for-production")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from dashboard.db.base import Base  # noqa: E402
from dashboard.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from dashboard.infrastructure.identity import hash_password  # noqa: E402
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache  # noqa: E402
from dashboard.models import Customer, User  # noqa: E402
import dashboard.infrastructure.database as db_module  # noqa: E402
from dashboard.main import app  # noqa: E402

TEST_EMAIL = "user@nextmail.com"
TEST_PASSWORD = "123456"


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
def view_cache():
    return ViewCache()


@pytest.fixture
async def client(test_engine, test_session_factory, view_cache):
    """FastAPI test client with DB and view cache dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_view_cache] = lambda: view_cache

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_customer(test_db):
    customer = Customer(
        name="Evil Rabbit", email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    )
    test_db.add(customer)
    await test_db.commit()
    await test_db.refresh(customer)
    return customer


@pytest.fixture
async def seed_user(test_db):
    user = User(
        name="User", email=TEST_EMAIL,
        password=hash_password(TEST_PASSWORD, rounds=4),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def logged_in_client(client, seed_user):
    """Client whose cookie jar holds a signed session for seed_user."""
    res = await client.post(
        "/login", data={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    assert res.status_code == 303
    return client
