"""Customer Schemas - declarative field-presence and type checks for customer writes.

Invariants:
    - CustomerReplace: all eleven non-key fields required
    - Strings are trimmed and must be non-empty; amounts must be finite numbers
    - CustomerPatch: at least one field, only allow-listed fields, no explicit nulls
    - Numeric strings ("120.50") are accepted for amounts, booleans are not
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel, ConfigDict, FiniteFloat, StringConstraints, field_validator, model_validator,
)

from agency_api.core.record_fields import CUSTOMER_AMOUNT_FIELDS

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Amount = FiniteFloat


def reject_bool(value: Any) -> Any:
    """Booleans are not amounts, even though pydantic would coerce them."""
    if isinstance(value, bool):
        raise ValueError("must be a number")
    return value


class CustomerReplace(BaseModel):
    """Full customer update (PUT) - every column except the key."""
    CUST_NAME: NonEmptyStr
    CUST_CITY: NonEmptyStr
    WORKING_AREA: NonEmptyStr
    CUST_COUNTRY: NonEmptyStr
    GRADE: NonEmptyStr
    OPENING_AMT: Amount
    RECEIVE_AMT: Amount
    PAYMENT_AMT: Amount
    OUTSTANDING_AMT: Amount
    PHONE_NO: NonEmptyStr
    AGENT_CODE: NonEmptyStr

    @field_validator(*CUSTOMER_AMOUNT_FIELDS, mode="before")
    @classmethod
    def amounts_are_numeric(cls, v: Any) -> Any:
        return reject_bool(v)


class CustomerPatch(BaseModel):
    """Partial customer update (PATCH) - any non-empty subset of the columns."""
    model_config = ConfigDict(extra="forbid")

    CUST_NAME: NonEmptyStr | None = None
    CUST_CITY: NonEmptyStr | None = None
    WORKING_AREA: NonEmptyStr | None = None
    CUST_COUNTRY: NonEmptyStr | None = None
    GRADE: NonEmptyStr | None = None
    OPENING_AMT: Amount | None = None
    RECEIVE_AMT: Amount | None = None
    PAYMENT_AMT: Amount | None = None
    OUTSTANDING_AMT: Amount | None = None
    PHONE_NO: NonEmptyStr | None = None
    AGENT_CODE: NonEmptyStr | None = None

    @field_validator(*CUSTOMER_AMOUNT_FIELDS, mode="before")
    @classmethod
    def amounts_are_numeric(cls, v: Any) -> Any:
        return reject_bool(v)

    @model_validator(mode="after")
    def validate_supplied_fields(self):
        if not self.model_fields_set:
            raise ValueError("At least one field to update is required")
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def supplied(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class CustomerRecord(BaseModel):
    """Customer row as returned by read endpoints."""
    CUST_CODE: str
    CUST_NAME: str
    CUST_CITY: str | None = None
    WORKING_AREA: str
    CUST_COUNTRY: str
    GRADE: str | None = None
    OPENING_AMT: float
    RECEIVE_AMT: float
    PAYMENT_AMT: float
    OUTSTANDING_AMT: float
    PHONE_NO: str
    AGENT_CODE: str

    @field_validator("GRADE", mode="before")
    @classmethod
    def grade_as_text(cls, v: Any) -> Any:
        # legacy `sample` schemas store GRADE as DECIMAL
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v


class MessageResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""
    message: str
