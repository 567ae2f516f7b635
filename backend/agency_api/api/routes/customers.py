"""Customer Routes - list, fetch, replace and patch customer records.

Invariants:
    - Request bodies are validated by Pydantic before the repository is called
    - Unknown customer on GET → 404; PUT/PATCH do not check existence
    - Database failures surface as DatabaseError → 500 via the global handler
"""

from fastapi import APIRouter, Depends

from agency_api.core.domain_types import CustomerCode, ResourceType, WriteOutcome
from agency_api.core.errors import ResourceNotFoundError
from agency_api.core.repository_protocols import CustomerRepository
from agency_api.infrastructure.repositories import get_customer_repository
from agency_api.schemas.customer import (
    CustomerPatch, CustomerRecord, CustomerReplace, MessageResponse,
)

router = APIRouter(tags=["Customers"])

_DB_ERROR = {500: {"description": "Database error"}}
_VALIDATION_ERROR = {400: {"description": "Validation failed"}}


@router.get(
    "/customers",
    response_model=list[CustomerRecord],
    summary="Return all customers",
    responses=_DB_ERROR,
)
async def list_customers(
    repo: CustomerRepository = Depends(get_customer_repository),
):
    """Every customer row, ordered by CUST_CODE."""
    return await repo.list_all()


@router.get(
    "/customers/{cust_code}",
    response_model=CustomerRecord,
    summary="Return customer with user-specified customer code",
    responses={404: {"description": "Customer not found"}, **_DB_ERROR},
)
async def get_customer(
    cust_code: str,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    record = await repo.get(CustomerCode(cust_code))
    if record is None:
        raise ResourceNotFoundError(ResourceType.CUSTOMER.value, cust_code)
    return record


@router.put(
    "/customer/update/{cust_code}",
    response_model=MessageResponse,
    summary="Update a customer by CUST_CODE",
    responses={**_VALIDATION_ERROR, **_DB_ERROR},
)
async def replace_customer(
    cust_code: str,
    body: CustomerReplace,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    """Overwrite every non-key column of the customer."""
    await repo.replace(CustomerCode(cust_code), body.model_dump())
    return MessageResponse(message=WriteOutcome.CUSTOMER_REPLACED.value)


@router.patch(
    "/customer/update/{cust_code}",
    response_model=MessageResponse,
    summary="Update a customer partially by CUST_CODE",
    responses={**_VALIDATION_ERROR, **_DB_ERROR},
)
async def patch_customer(
    cust_code: str,
    body: CustomerPatch,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    """Overwrite only the columns present in the body."""
    await repo.patch(CustomerCode(cust_code), body.supplied())
    return MessageResponse(message=WriteOutcome.CUSTOMER_PATCHED.value)
