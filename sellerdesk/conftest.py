"""Shared pytest fixtures for SellerDesk tests."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from sellerdesk.core.config import get_settings
from sellerdesk.core.database import Base, get_db
from sellerdesk.core.security import create_access_token, hash_password
from sellerdesk.features.auth.models import Seller
from sellerdesk.main import app

TEST_SELLER_ID = 1
TEST_SELLER_EMAIL = "seller@example.com"


# =============================================================================
# Unit Test Fixtures
# =============================================================================


@pytest.fixture
def mock_db() -> AsyncMock:
    """Session stand-in for routes whose service layer is patched."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
async def client(mock_db: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client with the database dependency stubbed out."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header for a seller with id TEST_SELLER_ID."""
    token = create_access_token(TEST_SELLER_ID, TEST_SELLER_EMAIL)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fixed_now() -> datetime:
    """Reference instant used by aggregation tests (a Monday)."""
    return datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


# =============================================================================
# Database Fixtures for Integration Tests
# =============================================================================


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for integration tests.

    Creates all tables, provides a session, and drops them afterwards.
    Requires PostgreSQL to be running (docker-compose up -d).
    """
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client whose requests share the integration session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


async def make_seller(db_session: AsyncSession, email: str, name: str = "Test Seller") -> Seller:
    """Insert a seller row and return it."""
    seller = Seller(
        name=name,
        email=email,
        password_hash=hash_password("secret123"),
        city="Pune",
    )
    db_session.add(seller)
    await db_session.flush()
    await db_session.refresh(seller)
    return seller


def bearer_for(seller: Seller) -> dict[str, str]:
    """Authorization header for an existing seller."""
    return {"Authorization": f"Bearer {create_access_token(seller.id, seller.email)}"}


@pytest.fixture
async def seller(db_session: AsyncSession) -> Seller:
    """A persisted seller for integration tests."""
    return await make_seller(db_session, "owner@example.com")


@pytest.fixture
async def other_seller(db_session: AsyncSession) -> Seller:
    """A second seller, used to check owner scoping."""
    return await make_seller(db_session, "other@example.com", name="Other Seller")


@pytest.fixture
def seller_headers(seller: Seller) -> dict[str, str]:
    return bearer_for(seller)


@pytest.fixture
def other_seller_headers(other_seller: Seller) -> dict[str, str]:
    return bearer_for(other_seller)
