"""Shared test configuration and fixtures.

Uses a transactional rollback strategy per test for full isolation:
- Tables are created once per session on the engine from TEST_DATABASE_URL.
- Each test runs inside a transaction that rolls back after the test.

TEST_DATABASE_URL defaults to an in-memory SQLite database; point it at a
PostgreSQL test database (postgresql+asyncpg://...) to run against the
production dialect.
"""

import os
import uuid
from collections.abc import AsyncGenerator
from datetime import date, timedelta

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from revportal.auth.security import create_token_pair, hash_password
from revportal.database import Base, get_db
from revportal.main import app
from revportal.models.hotel import Hotel
from revportal.models.user import User, UserHotelAssignment

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")
TEST_PASSWORD = "testpass123"


def _make_engine():
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine
    return create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Session-scoped: create / drop all tables once per test session
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def test_engine():
    """Create a session-scoped engine tied to the session event loop."""
    engine = _make_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def setup_test_db(test_engine):
    """Create all tables at the start of the session and drop them at the end."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ---------------------------------------------------------------------------
# Per-test: transactional rollback for isolation
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(test_engine, setup_test_db) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


async def make_user(
    db: AsyncSession,
    role: str = "viewer",
    scope: str = "property",
    is_active: bool = True,
    hotels: list[Hotel] | None = None,
) -> User:
    """Insert a user, optionally assigned to ``hotels``."""
    unique = uuid.uuid4().hex[:8]
    user = User(
        email=f"{role}-{unique}@example.com",
        hashed_password=hash_password(TEST_PASSWORD),
        full_name=f"Test {role.title()}",
        role=role,
        scope=scope,
        is_active=is_active,
    )
    db.add(user)
    await db.flush()

    for hotel in hotels or []:
        db.add(UserHotelAssignment(user_id=user.id, hotel_id=hotel.id))
    await db.flush()
    await db.refresh(user)
    return user


async def make_hotel(
    db: AsyncSession,
    name: str = "Virgin Hotels Dallas",
    brand: str = "virgin_hotels",
    status: str = "active",
) -> Hotel:
    hotel = Hotel(name=name, location="Dallas, TX", brand=brand, region="US", status=status)
    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)
    return hotel


def headers_for(user: User) -> dict[str, str]:
    """Authorization headers carrying a fresh access token for ``user``."""
    tokens = create_token_pair(str(user.id))
    return {"Authorization": f"Bearer {tokens['access_token']}"}


def performance_payload(**overrides) -> dict:
    """A valid weekly performance body; override any field."""
    start = date(2025, 3, 2)
    payload = {
        "period_type": "weekly",
        "period_start": start.isoformat(),
        "period_end": (start + timedelta(days=6)).isoformat(),
        "occupancy_actual": 80,
        "occupancy_budget": 78,
        "occupancy_prior_year": 75,
        "occupancy_comp_set": 72,
        "adr_actual": 250,
        "adr_budget": 240,
        "adr_prior_year": 230,
        "adr_comp_set": 245,
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Convenience fixtures: hotels and users of every role/scope
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def hotel(db_session: AsyncSession) -> Hotel:
    """An active Virgin Hotels property."""
    return await make_hotel(db_session)


@pytest_asyncio.fixture
async def other_hotel(db_session: AsyncSession) -> Hotel:
    """A second hotel that property-scope fixtures are NOT assigned to."""
    return await make_hotel(db_session, name="Kasbah Tamadot", brand="virgin_limited_edition")


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await make_user(db_session, role="administrator", scope="corporate")


@pytest_asyncio.fixture
async def admin_headers(admin_user: User) -> dict[str, str]:
    return headers_for(admin_user)


@pytest_asyncio.fixture
async def editor_user(db_session: AsyncSession, hotel: Hotel) -> User:
    """Property-scope editor assigned to ``hotel`` only."""
    return await make_user(db_session, role="editor", scope="property", hotels=[hotel])


@pytest_asyncio.fixture
async def editor_headers(editor_user: User) -> dict[str, str]:
    return headers_for(editor_user)


@pytest_asyncio.fixture
async def viewer_user(db_session: AsyncSession, hotel: Hotel) -> User:
    """Property-scope viewer assigned to ``hotel`` only."""
    return await make_user(db_session, role="viewer", scope="property", hotels=[hotel])


@pytest_asyncio.fixture
async def viewer_headers(viewer_user: User) -> dict[str, str]:
    return headers_for(viewer_user)


@pytest_asyncio.fixture
async def corporate_viewer(db_session: AsyncSession) -> User:
    return await make_user(db_session, role="viewer", scope="corporate")


@pytest_asyncio.fixture
async def corporate_headers(corporate_viewer: User) -> dict[str, str]:
    return headers_for(corporate_viewer)
