"""Domain exceptions for the Timesheet application.

Every failure the service layer surfaces is one of these. Each carries the
HTTP status it maps to, so the presentation layer renders it without
re-classifying. Storage faults that are not already a TimesheetException are
wrapped in InternalErrorException by the service.
"""

from typing import Any


class TimesheetException(Exception):
    """Base exception for all Timesheet application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
        status_code: HTTP status the error maps to.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class BadRequestException(TimesheetException):
    """Raised when a request cannot be processed as given (400)."""

    status_code = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "BAD_REQUEST", details)


class ValidationException(BadRequestException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        super().__init__(message, {"field": field} if field else None)
        self.error_code = "VALIDATION_ERROR"


class ResourceNotFoundException(TimesheetException):
    """Raised when a requested resource is not found (404)."""

    status_code = 404

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        resource_id: Any = None,
    ) -> None:
        """Initialize with a message and optional resource identity.

        Args:
            message: Human-readable message (e.g. 'Role permission not found').
            resource_type: Type of resource (e.g. 'role_permission').
            resource_id: The identifier that was looked up.
        """
        details: dict[str, Any] = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = resource_id
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class InternalErrorException(TimesheetException):
    """Raised for unexpected storage faults or failed internal checks (500)."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, "INTERNAL_ERROR")


class SqlNotConfiguredException(TimesheetException):
    """Raised when an operation requires the SQL database but it is not configured."""

    status_code = 503

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
