"""Boundary Protocols - contracts between routes and persistence.

Invariants:
    - Routes depend on these Protocols, never on SQLAlchemy directly
    - Every method is one self-contained database round trip (one session)
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
"""

from typing import Any, Mapping, Protocol, Sequence

from agency_api.core.domain_types import AgentCode, CustomerCode, Record


class CustomerRepository(Protocol):
    """Contract for customer persistence."""
    async def list_all(self) -> list[Record]: ...
    async def get(self, code: CustomerCode) -> Record | None: ...
    async def replace(self, code: CustomerCode, fields: Mapping[str, Any]) -> None: ...
    async def patch(self, code: CustomerCode, fields: Mapping[str, Any]) -> None: ...


class AgentRepository(Protocol):
    """Contract for agent persistence."""
    async def list_all(self) -> list[Record]: ...
    async def create_many(self, records: Sequence[Mapping[str, Any]]) -> int: ...
    async def delete(self, code: AgentCode) -> None: ...
