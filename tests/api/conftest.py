"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - Unhandled exceptions come back as 500 responses instead of raising in the test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behavior is not exercised here)
    - Seed fixtures write through test_db and commit, so every request sees them
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import store_api.infrastructure.database as db_module
import store_api.models  # noqa: F401
from store_api.config import get_settings
from store_api.db.base import Base
from store_api.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from store_api.main import app
from store_api.models.category import Category
from store_api.models.product import Product


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
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


def _make_client() -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with _make_client() as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def untouchable_db():
    """A session stand-in that records any use; for checks that must not hit the store."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
async def no_db_client(untouchable_db):
    async def override_get_db():
        yield untouchable_db

    app.dependency_overrides[get_db] = override_get_db
    async with _make_client() as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def secret() -> str:
    return get_settings().access_token_secret


@pytest.fixture
async def make_category(test_db):
    async def _make(name: str) -> Category:
        category = Category(name=name)
        test_db.add(category)
        await test_db.commit()
        await test_db.refresh(category)
        return category
    return _make


@pytest.fixture
async def make_product(test_db):
    async def _make(
        category: Category, name: str = "Kindle", price: str = "99.99",
    ) -> Product:
        product = Product(
            name=name, description=f"{name} description",
            price=Decimal(price), category_id=category.id,
        )
        test_db.add(product)
        await test_db.commit()
        await test_db.refresh(product)
        return product
    return _make


@pytest.fixture
async def category(make_category):
    return await make_category("Books")
