"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerCode and AgentCode wrap opaque strings; no format is enforced
    - A Record is a flat mapping keyed by database column name
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerCode = NewType("CustomerCode", str)
AgentCode = NewType("AgentCode", str)


# ─── Value Types ─────────────────────────────────────────────────

Record = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Resources exposed by the API - used in not-found errors and logs."""
    CUSTOMER = "Customer"
    AGENT = "Agent"


class WriteOutcome(str, Enum):
    """Success messages returned by write endpoints."""
    CUSTOMER_REPLACED = "Customer updated successfully"
    CUSTOMER_PATCHED = "Customer fields updated successfully"
    AGENTS_CREATED = "Agent record created successfully"
    AGENT_DELETED = "Agent record deleted successfully"
