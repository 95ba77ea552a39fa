"""Tests for domain exceptions (error_code, message, details, status_code)."""

import pytest

from timesheet.domain.exceptions import (
    BadRequestException,
    InternalErrorException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TimesheetException,
    ValidationException,
)


def test_timesheet_exception_default_error_code() -> None:
    """Base TimesheetException uses class name as error_code when not provided."""
    exc = TimesheetException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TimesheetException"
    assert exc.details == {}
    assert exc.status_code == 500


def test_timesheet_exception_to_dict() -> None:
    exc = TimesheetException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_bad_request_exception() -> None:
    exc = BadRequestException("ID is required for update")
    assert exc.status_code == 400
    assert exc.error_code == "BAD_REQUEST"
    assert str(exc) == "ID is required for update"


def test_validation_exception_is_bad_request_with_field() -> None:
    """ValidationException maps to 400 and carries the failing field."""
    exc = ValidationException("Invalid format", field="permissionId")
    assert isinstance(exc, BadRequestException)
    assert exc.status_code == 400
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "permissionId"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    """ResourceNotFoundException has RESOURCE_NOT_FOUND and resource identity in details."""
    exc = ResourceNotFoundException("Role permission not found", "role_permission", 42)
    assert exc.status_code == 404
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "role_permission", "resource_id": 42}


def test_resource_not_found_without_identity() -> None:
    exc = ResourceNotFoundException("No records found")
    assert exc.details == {}


def test_internal_error_exception_default_message() -> None:
    exc = InternalErrorException()
    assert exc.status_code == 500
    assert exc.error_code == "INTERNAL_ERROR"
    assert exc.message == "Internal server error"


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.status_code == 503
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "SQL database" in exc.message


@pytest.mark.parametrize(
    "exc",
    [
        BadRequestException("bad"),
        ValidationException("invalid"),
        ResourceNotFoundException("missing"),
        InternalErrorException("boom"),
        SqlNotConfiguredException(),
    ],
)
def test_all_domain_exceptions_share_base(exc: TimesheetException) -> None:
    assert isinstance(exc, TimesheetException)
    assert isinstance(exc, Exception)
