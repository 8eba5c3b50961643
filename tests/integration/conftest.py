"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agrimarket.data.models import Base, ListingModel, ProfileModel
from agrimarket.data.uow import create_uow
from agrimarket.infrastructure.adapters.catalog import SqlAlchemyCatalog
from agrimarket.infrastructure.adapters.directory import SqlAlchemyDirectory
from agrimarket.infrastructure.event_bus import InMemoryEventBus


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory with Directory and Catalog rows seeded."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        session.add_all(
            [
                ProfileModel(
                    id="buyer-1",
                    full_name="Asha Patil",
                    phone="+91-98200-00001",
                    email="asha@example.com",
                    address="12 Market Road, Nashik",
                ),
                ProfileModel(id="buyer-2", full_name="Ravi Kumar"),
                ListingModel(id="listing-1", crop_name="Alphonso Mango"),
                ListingModel(id="listing-2", crop_name="Basmati Rice"),
            ]
        )
        await session.commit()
    yield session_factory


@pytest_asyncio.fixture
async def sql_uow_factory(test_session_factory):
    return lambda: create_uow(test_session_factory)


@pytest_asyncio.fixture
async def test_client(test_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create API client bound to the test database."""
    from api.dependencies import get_catalog, get_directory, get_event_bus, get_uow_factory
    from api.main import app

    bus = InMemoryEventBus()

    app.dependency_overrides[get_uow_factory] = lambda: (lambda: create_uow(test_session_factory))
    app.dependency_overrides[get_directory] = lambda: SqlAlchemyDirectory(test_session_factory)
    app.dependency_overrides[get_catalog] = lambda: SqlAlchemyCatalog(test_session_factory)
    app.dependency_overrides[get_event_bus] = lambda: bus

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
