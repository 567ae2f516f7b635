"""SQL repositories - exercised directly against an in-memory SQLite engine."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from agency_api.core.errors import DatabaseError, FieldValidationError
from agency_api.db.base import Base
from agency_api.infrastructure.database import DatabaseSessionManager
from agency_api.infrastructure.repositories import SqlAgentRepository, SqlCustomerRepository
from agency_api.models.customer import Customer

AGENT = {
    "AGENT_CODE": "A001",
    "AGENT_NAME": "Subbarao",
    "WORKING_AREA": "Bangalore",
    "COMMISSION": 0.14,
    "PHONE_NO": "077-12346674",
    "COUNTRY": "India",
}


@pytest.fixture
async def manager():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    manager = DatabaseSessionManager.from_engine(engine)
    yield manager
    await manager.dispose()


@pytest.fixture
async def seeded(manager):
    await SqlAgentRepository(manager).create_many([AGENT])
    async with manager.session() as db:
        db.add(Customer(
            cust_code="C010", cust_name="Karl", cust_city=None,
            working_area="Brisbane", cust_country="Australia", grade=None,
            opening_amt=1, receive_amt=2, payment_amt=3, outstanding_amt=0,
            phone_no="AAAA", agent_code="A001",
        ))
        await db.commit()
    return manager


async def test_records_keyed_by_column_name_in_table_order(seeded):
    records = await SqlCustomerRepository(seeded).list_all()
    assert list(records[0]) == [
        "CUST_CODE", "CUST_NAME", "CUST_CITY", "WORKING_AREA", "CUST_COUNTRY",
        "GRADE", "OPENING_AMT", "RECEIVE_AMT", "PAYMENT_AMT", "OUTSTANDING_AMT",
        "PHONE_NO", "AGENT_CODE",
    ]
    assert records[0]["CUST_CITY"] is None


async def test_get_missing_returns_none(seeded):
    assert await SqlCustomerRepository(seeded).get("NOPE") is None


async def test_patch_with_unknown_column_never_executes(seeded):
    repo = SqlCustomerRepository(seeded)
    with pytest.raises(FieldValidationError):
        await repo.patch("C010", {"CUST_NAME": "x", "DROP TABLE customer; --": 1})
    assert (await repo.get("C010"))["CUST_NAME"] == "Karl"


async def test_patch_sets_only_given_columns(seeded):
    repo = SqlCustomerRepository(seeded)
    await repo.patch("C010", {"GRADE": "3"})
    record = await repo.get("C010")
    assert record["GRADE"] == "3"
    assert record["CUST_NAME"] == "Karl"


async def test_create_many_empty_is_noop(manager):
    assert await SqlAgentRepository(manager).create_many([]) == 0


async def test_create_many_duplicate_rolls_back_batch(seeded):
    repo = SqlAgentRepository(seeded)
    with pytest.raises(DatabaseError):
        await repo.create_many([{**AGENT, "AGENT_CODE": "A002"}, AGENT])
    assert [a["AGENT_CODE"] for a in await repo.list_all()] == ["A001"]


async def test_delete_absent_agent_is_silent(seeded):
    repo = SqlAgentRepository(seeded)
    await repo.delete("A404")
    assert len(await repo.list_all()) == 1
