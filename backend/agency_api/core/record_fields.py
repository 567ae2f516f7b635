"""Record Fields - column allow-lists and record-key translation for writes.

Invariants:
    - Column names in SQL statements come only from these tables, never from input
    - CUST_CODE is the lookup key and is never updatable
    - build_customer_update() rejects unknown keys instead of dropping them

Design Decisions:
    - Pure functions over dicts: repositories translate, routes stay thin
"""

from typing import Any, Mapping

from agency_api.core.errors import FieldValidationError


# Record key -> ORM attribute on models.customer.Customer
CUSTOMER_UPDATABLE_FIELDS: dict[str, str] = {
    "CUST_NAME": "cust_name",
    "CUST_CITY": "cust_city",
    "WORKING_AREA": "working_area",
    "CUST_COUNTRY": "cust_country",
    "GRADE": "grade",
    "OPENING_AMT": "opening_amt",
    "RECEIVE_AMT": "receive_amt",
    "PAYMENT_AMT": "payment_amt",
    "OUTSTANDING_AMT": "outstanding_amt",
    "PHONE_NO": "phone_no",
    "AGENT_CODE": "agent_code",
}

CUSTOMER_AMOUNT_FIELDS: tuple[str, ...] = (
    "OPENING_AMT", "RECEIVE_AMT", "PAYMENT_AMT", "OUTSTANDING_AMT",
)

CUSTOMER_STRING_FIELDS: tuple[str, ...] = tuple(
    key for key in CUSTOMER_UPDATABLE_FIELDS if key not in CUSTOMER_AMOUNT_FIELDS
)

# Record key -> ORM attribute on models.agent.Agent
AGENT_FIELDS: dict[str, str] = {
    "AGENT_CODE": "agent_code",
    "AGENT_NAME": "agent_name",
    "WORKING_AREA": "working_area",
    "COMMISSION": "commission",
    "PHONE_NO": "phone_no",
    "COUNTRY": "country",
}


def build_customer_update(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a customer record fragment into ORM attribute assignments.

    Raises FieldValidationError when the fragment is empty or names a
    column outside CUSTOMER_UPDATABLE_FIELDS.
    """
    if not fields:
        raise FieldValidationError(
            "At least one field to update is required", field="body",
        )
    unknown = [key for key in fields if key not in CUSTOMER_UPDATABLE_FIELDS]
    if unknown:
        raise FieldValidationError(
            f"Fields not updatable: {', '.join(sorted(unknown))}",
            field=unknown[0],
        )
    return {CUSTOMER_UPDATABLE_FIELDS[key]: value for key, value in fields.items()}


def build_agent_values(record: Mapping[str, Any]) -> dict[str, Any]:
    """Translate one agent record into ORM constructor arguments."""
    missing = [key for key in AGENT_FIELDS if key not in record]
    if missing:
        raise FieldValidationError(
            f"Field {missing[0]} is missing in one or more records",
            field=missing[0],
        )
    return {attr: record[key] for key, attr in AGENT_FIELDS.items()}
