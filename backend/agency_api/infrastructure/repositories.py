"""SQL Repositories - customer and agent persistence over the shared session manager.

Invariants:
    - One session (one pooled connection) per method call, released on every exit path
    - Every statement is parameterized; column names come from core/record_fields.py
    - Writes commit inside the session; any failure rolls back the whole call
    - Not-found is reported by returning None, never by raising

Design Decisions:
    - Repositories take the DatabaseSessionManager at construction time, so tests
      can hand them a manager bound to an in-memory engine
"""

import logging
from typing import Any, Mapping, Sequence

from fastapi import Depends
from sqlalchemy import delete, insert, select, update

from agency_api.core.domain_types import AgentCode, CustomerCode, Record
from agency_api.core.record_fields import build_agent_values, build_customer_update
from agency_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from agency_api.models.agent import Agent
from agency_api.models.customer import Customer

logger = logging.getLogger(__name__)


class SqlCustomerRepository:
    """CustomerRepository backed by the `customer` table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def list_all(self) -> list[Record]:
        async with self._manager.session() as db:
            result = await db.execute(select(Customer).order_by(Customer.cust_code))
            return [row.to_record() for row in result.scalars().all()]

    async def get(self, code: CustomerCode) -> Record | None:
        async with self._manager.session() as db:
            result = await db.execute(
                select(Customer).where(Customer.cust_code == code),
            )
            customer = result.scalar_one_or_none()
            return customer.to_record() if customer else None

    async def replace(self, code: CustomerCode, fields: Mapping[str, Any]) -> None:
        """Set every updatable column. Zero matched rows is not an error."""
        await self._update(code, fields)

    async def patch(self, code: CustomerCode, fields: Mapping[str, Any]) -> None:
        """Set only the supplied columns. Zero matched rows is not an error."""
        await self._update(code, fields)

    async def _update(self, code: CustomerCode, fields: Mapping[str, Any]) -> None:
        values = build_customer_update(fields)
        async with self._manager.session() as db:
            result = await db.execute(
                update(Customer)
                .where(Customer.cust_code == code)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            await db.commit()
        logger.info(
            f"Customer {code} updated ({result.rowcount} row(s) matched)",
            extra={"cust_code": code, "fields": sorted(fields)},
        )


class SqlAgentRepository:
    """AgentRepository backed by the `agents` table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def list_all(self) -> list[Record]:
        async with self._manager.session() as db:
            result = await db.execute(select(Agent).order_by(Agent.agent_code))
            return [row.to_record() for row in result.scalars().all()]

    async def create_many(self, records: Sequence[Mapping[str, Any]]) -> int:
        """Insert all records in one transaction. Returns the inserted count."""
        rows = [build_agent_values(record) for record in records]
        if not rows:
            return 0
        async with self._manager.session() as db:
            await db.execute(insert(Agent), rows)
            await db.commit()
        logger.info(
            f"Inserted {len(rows)} agent record(s)",
            extra={"record_count": len(rows)},
        )
        return len(rows)

    async def delete(self, code: AgentCode) -> None:
        """Delete by code. Deleting an absent agent is not an error."""
        async with self._manager.session() as db:
            result = await db.execute(
                delete(Agent)
                .where(Agent.agent_code == code)
                .execution_options(synchronize_session=False),
            )
            await db.commit()
        logger.info(
            f"Agent {code} delete ({result.rowcount} row(s) removed)",
            extra={"agent_code": code},
        )


def get_customer_repository(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> SqlCustomerRepository:
    """FastAPI dependency - customer repository bound to the process pool."""
    return SqlCustomerRepository(manager)


def get_agent_repository(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> SqlAgentRepository:
    """FastAPI dependency - agent repository bound to the process pool."""
    return SqlAgentRepository(manager)
