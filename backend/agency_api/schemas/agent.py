"""Agent Schemas - batch-create validation and read models for agents.

Invariants:
    - Every record carries all six columns
    - AGENT_CODE is a non-empty string after trimming
    - COMMISSION is a finite number; booleans are rejected
    - A create body is one record or a non-empty list of records
"""

from typing import Annotated, Any, Union

from pydantic import BaseModel, Field, FiniteFloat, StringConstraints, field_validator

from agency_api.schemas.customer import MessageResponse, reject_bool


class AgentCreate(BaseModel):
    """One agent record to insert."""
    AGENT_CODE: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    AGENT_NAME: str
    WORKING_AREA: str
    COMMISSION: FiniteFloat
    PHONE_NO: str
    COUNTRY: str

    @field_validator("COMMISSION", mode="before")
    @classmethod
    def commission_is_numeric(cls, v: Any) -> Any:
        return reject_bool(v)


AgentCreateBody = Union[
    Annotated[list[AgentCreate], Field(min_length=1)],
    AgentCreate,
]


def as_batch(body: AgentCreateBody) -> list[AgentCreate]:
    """Normalize a create body to a list of records."""
    return body if isinstance(body, list) else [body]


class AgentRecord(BaseModel):
    """Agent row as returned by read endpoints."""
    AGENT_CODE: str
    AGENT_NAME: str | None = None
    WORKING_AREA: str | None = None
    COMMISSION: float | None = None
    PHONE_NO: str | None = None
    COUNTRY: str | None = None


class AgentsCreatedResponse(MessageResponse):
    """Acknowledgement for a batch insert."""
    count: int
