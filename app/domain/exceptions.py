"""Domain exceptions for the AIRM application.

Defines domain-level exceptions that represent business rule violations
and search failures. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception
handlers.
"""

from typing import Any


class AirmException(Exception):
    """Base exception for all AIRM application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, entity_type).
    """

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
        """Return the JSON error body used by the exception handlers."""
        return {
            "success": False,
            "error": self.message,
            "code": self.error_code,
            "details": self.details,
        }


class ValidationException(AirmException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidQueryException(AirmException):
    """Raised when the search text is missing or too long at the API boundary."""

    def __init__(self, message: str, error_code: str = "INVALID_QUERY", **details: Any) -> None:
        super().__init__(message, error_code, details)


class InvalidEntityTypeException(AirmException):
    """Raised when none of the requested entity types is searchable."""

    def __init__(self, requested: list[str], allowed: list[str]) -> None:
        super().__init__(
            f"Invalid entity type. Must be one of: {', '.join(allowed)}",
            "INVALID_ENTITY_TYPE",
            {"requested": requested, "allowed": allowed},
        )


class FilterValidationException(AirmException):
    """Raised when a search filter key is unknown or its value has the wrong shape."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        """Initialize with message and the offending filter key.

        Args:
            message: Description of the filter problem.
            field: Filter key as sent by the caller.
            value: Offending value (repr'd into details).
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, "INVALID_FILTERS", details)


class OrganizationNotFoundException(AirmException):
    """Raised when the requested organization does not exist."""

    def __init__(self, organization_id: str) -> None:
        super().__init__(
            "Invalid or unknown organization",
            "ORGANIZATION_NOT_FOUND",
            {"organization_id": organization_id},
        )


class SearchFailedException(AirmException):
    """Raised when the lookup for one entity type fails; the whole search fails.

    The original error is chained as __cause__ and its type recorded in details.
    """

    def __init__(self, entity_type: str, reason: str) -> None:
        super().__init__(
            f"Search failed while querying {entity_type}",
            "SEARCH_FAILED",
            {"entity_type": entity_type, "reason": reason},
        )


class SearchTimeoutException(AirmException):
    """Raised when a search branch or the whole search exceeds its time budget."""

    def __init__(self, timeout_seconds: float, entity_type: str | None = None) -> None:
        details: dict[str, Any] = {"timeout_seconds": timeout_seconds}
        if entity_type:
            details["entity_type"] = entity_type
            message = f"Search for {entity_type} timed out after {timeout_seconds} seconds"
        else:
            message = f"Search timed out after {timeout_seconds} seconds"
        super().__init__(message, "SEARCH_TIMEOUT", details)
