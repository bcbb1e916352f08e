"""
Pytest fixtures for test database, client, and catalogue data.

Each test gets a fresh schema on its own engine. By default that is an
in-memory SQLite database; point TEST_DATABASE_URL at PostgreSQL to run the
same suite against the production engine.
"""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.models import City, Movie, Partner, Show, Theatre
from app.services.strategy_factory import set_access_policy
from tests.factories import add_show, at_hour

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _create_test_engine() -> AsyncEngine:
    if not TEST_DATABASE_URL.startswith("sqlite"):
        return create_async_engine(TEST_DATABASE_URL, echo=False)

    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # ON DELETE CASCADE is only honoured with foreign keys switched on
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield engine, then drop tables for isolation."""
    engine = _create_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_access_policy():
    """Tests that install a policy get the configured default back afterwards."""
    yield
    set_access_policy(None)


@pytest_asyncio.fixture
async def city(db_session: AsyncSession) -> City:
    city = City(name="Hyderabad")
    db_session.add(city)
    await db_session.commit()
    return city


@pytest_asyncio.fixture
async def other_city(db_session: AsyncSession) -> City:
    city = City(name="Bengaluru")
    db_session.add(city)
    await db_session.commit()
    return city


@pytest_asyncio.fixture
async def partner(db_session: AsyncSession) -> Partner:
    partner = Partner(name="PVR Cinemas")
    db_session.add(partner)
    await db_session.commit()
    return partner


@pytest_asyncio.fixture
async def other_partner(db_session: AsyncSession) -> Partner:
    partner = Partner(name="INOX")
    db_session.add(partner)
    await db_session.commit()
    return partner


@pytest_asyncio.fixture
async def movie(db_session: AsyncSession) -> Movie:
    movie = Movie(title="Inception", language="English", genre="Sci-Fi", duration_in_minutes=148)
    db_session.add(movie)
    await db_session.commit()
    return movie


@pytest_asyncio.fixture
async def other_movie(db_session: AsyncSession) -> Movie:
    movie = Movie(title="Interstellar", language="English", genre="Sci-Fi", duration_in_minutes=169)
    db_session.add(movie)
    await db_session.commit()
    return movie


@pytest_asyncio.fixture
async def theatre(db_session: AsyncSession, city: City, partner: Partner) -> Theatre:
    theatre = Theatre(name="PVR", city=city, partner=partner)
    db_session.add(theatre)
    await db_session.commit()
    return theatre


@pytest_asyncio.fixture
async def other_theatre(db_session: AsyncSession, other_city: City, other_partner: Partner) -> Theatre:
    theatre = Theatre(name="INOX Garuda", city=other_city, partner=other_partner)
    db_session.add(theatre)
    await db_session.commit()
    return theatre


@pytest_asyncio.fixture
async def future_show(db_session: AsyncSession, movie: Movie, theatre: Theatre) -> Show:
    """Inception at PVR tomorrow 18:00 UTC."""
    return await add_show(db_session, movie, theatre, at_hour(1, 18))


@pytest_asyncio.fixture
async def past_show(db_session: AsyncSession, movie: Movie, theatre: Theatre) -> Show:
    """Inception at PVR yesterday 18:00 UTC."""
    return await add_show(db_session, movie, theatre, at_hour(-1, 18))
