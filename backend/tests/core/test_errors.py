"""Error Hierarchy - status codes and REST envelope shape."""

from agency_api.core.domain_types import ResourceType
from agency_api.core.errors import (
    AgencyError,
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    FieldValidationError,
    ResourceNotFoundError,
)


def test_not_found_is_404_with_resource_context():
    err = ResourceNotFoundError(ResourceType.CUSTOMER.value, "C999")
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Customer 'C999' not found"
    assert body["context"] == {"resource_type": "Customer", "resource_id": "C999"}


def test_database_error_is_critical_500():
    err = DatabaseError("Database driver error", "query")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.category is ErrorCategory.DATABASE
    assert err.operation == "query"
    assert err.message == "Database query failed: Database driver error"


def test_field_validation_error_is_400():
    err = FieldValidationError("bad", field="GRADE")
    assert err.http_status == 400
    assert err.to_response()["error"]["category"] == "validation"


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("Agent", "A1"),
        DatabaseError("x", "commit"),
        FieldValidationError("x", "f"),
    ):
        assert isinstance(err, AgencyError)
        assert "timestamp" in err.to_response()["error"]


def test_field_validation_error_severity_and_field():
    err = FieldValidationError("unknown field", field="CUST_CODE")
    assert err.severity is ErrorSeverity.ERROR
    assert err.field == "CUST_CODE"
    assert err.to_response()["error"]["context"] == {
        "resource_type": None, "resource_id": None,
    }
