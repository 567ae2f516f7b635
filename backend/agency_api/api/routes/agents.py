"""Agent Routes - list, batch-create and delete agent records.

Invariants:
    - POST accepts one record or a non-empty list; all rows commit together or none do
    - DELETE always answers 200, whether or not the agent existed
"""

from fastapi import APIRouter, Body, Depends

from agency_api.core.domain_types import AgentCode, WriteOutcome
from agency_api.core.repository_protocols import AgentRepository
from agency_api.infrastructure.repositories import get_agent_repository
from agency_api.schemas.agent import (
    AgentCreateBody, AgentRecord, AgentsCreatedResponse, as_batch,
)
from agency_api.schemas.customer import MessageResponse

router = APIRouter(prefix="/agents", tags=["Agents"])

_DB_ERROR = {500: {"description": "Database error"}}


@router.get(
    "",
    response_model=list[AgentRecord],
    summary="Return all agents",
    responses=_DB_ERROR,
)
async def list_agents(
    repo: AgentRepository = Depends(get_agent_repository),
):
    return await repo.list_all()


@router.post(
    "/create",
    response_model=AgentsCreatedResponse,
    summary="Create one or more agent records",
    responses={400: {"description": "Validation failed"}, **_DB_ERROR},
)
async def create_agents(
    body: AgentCreateBody = Body(...),
    repo: AgentRepository = Depends(get_agent_repository),
):
    """Insert a single agent object or an array of them in one transaction."""
    records = [agent.model_dump() for agent in as_batch(body)]
    count = await repo.create_many(records)
    return AgentsCreatedResponse(
        message=WriteOutcome.AGENTS_CREATED.value, count=count,
    )


@router.delete(
    "/delete/{agent_code}",
    response_model=MessageResponse,
    summary="Delete an agent record by AGENT_CODE",
    responses=_DB_ERROR,
)
async def delete_agent(
    agent_code: str,
    repo: AgentRepository = Depends(get_agent_repository),
):
    await repo.delete(AgentCode(agent_code))
    return MessageResponse(message=WriteOutcome.AGENT_DELETED.value)
