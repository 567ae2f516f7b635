"""API test fixtures - in-memory SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with both tables
    - db_manager swapped for one bound to the test engine, restored afterwards
    - seed_records inserts two agents and two customers (C001, C002)
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import agency_api.infrastructure.database as db_module
from agency_api.db.base import Base
from agency_api.infrastructure.database import DatabaseSessionManager
from agency_api.main import app
from agency_api.models.agent import Agent
from agency_api.models.customer import Customer
from tests.api.seed_data import A003, A008, C001, C002, build_agent, build_customer


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
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_records(test_db):
    """Two agents and two customers."""
    test_db.add_all([build_agent(A003), build_agent(A008)])
    test_db.add_all([build_customer(C001), build_customer(C002)])
    await test_db.commit()


@asynccontextmanager
async def _client_for(engine):
    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager.from_engine(engine)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def client(test_engine):
    """FastAPI test client with the session manager bound to the test engine."""
    async with _client_for(test_engine) as c:
        yield c


@pytest.fixture
async def broken_client():
    """Client whose database has no tables - every query fails."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with _client_for(engine) as c:
        yield c
    await engine.dispose()


@pytest.fixture
async def fetch_customer(test_session_factory):
    """Read a customer row straight from the test DB, bypassing the API."""
    async def _fetch(code: str) -> dict | None:
        async with test_session_factory() as session:
            row = await session.get(Customer, code)
            return row.to_record() if row else None
    return _fetch


@pytest.fixture
async def fetch_agent_codes(test_session_factory):
    async def _fetch() -> list[str]:
        async with test_session_factory() as session:
            result = await session.execute(select(Agent.agent_code).order_by(Agent.agent_code))
            return list(result.scalars().all())
    return _fetch
