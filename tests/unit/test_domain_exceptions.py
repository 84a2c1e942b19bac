"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from app.domain.exceptions import (
    AirmException,
    FilterValidationException,
    InvalidEntityTypeException,
    InvalidQueryException,
    OrganizationNotFoundException,
    SearchFailedException,
    SearchTimeoutException,
    ValidationException,
)


def test_airm_exception_default_error_code() -> None:
    """Base AirmException uses class name as error_code when not provided."""
    exc = AirmException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "AirmException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    """to_dict() is the JSON error body: success false, error, code, details."""
    exc = AirmException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "success": False,
        "error": "Oops",
        "code": "CUSTOM",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("page must be >= 1", field="page")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "page"}
    assert ValidationException("Invalid").details == {}


def test_invalid_query_exception_codes() -> None:
    """InvalidQueryException defaults to INVALID_QUERY; QUERY_TOO_LONG carries extras."""
    assert InvalidQueryException("Search query is required").error_code == "INVALID_QUERY"
    exc = InvalidQueryException("too long", error_code="QUERY_TOO_LONG", max_length=200)
    assert exc.error_code == "QUERY_TOO_LONG"
    assert exc.details == {"max_length": 200}


def test_invalid_entity_type_exception() -> None:
    """InvalidEntityTypeException lists the allowed types in the message."""
    exc = InvalidEntityTypeException(["policy"], ["ai_system", "risk"])
    assert exc.error_code == "INVALID_ENTITY_TYPE"
    assert exc.message == "Invalid entity type. Must be one of: ai_system, risk"
    assert exc.details == {"requested": ["policy"], "allowed": ["ai_system", "risk"]}


def test_filter_validation_exception_reprs_value() -> None:
    """FilterValidationException records field and repr of value."""
    exc = FilterValidationException("bad", field="riskTier", value="EXTREME")
    assert exc.error_code == "INVALID_FILTERS"
    assert exc.details == {"field": "riskTier", "value": "'EXTREME'"}
    assert FilterValidationException("Invalid filters JSON format").details == {}


def test_organization_not_found_exception() -> None:
    exc = OrganizationNotFoundException("org-x")
    assert exc.error_code == "ORGANIZATION_NOT_FOUND"
    assert exc.details == {"organization_id": "org-x"}


def test_search_failed_exception_names_entity_type() -> None:
    """SearchFailedException identifies the failing entity type."""
    exc = SearchFailedException("evidence", "OperationalError")
    assert exc.error_code == "SEARCH_FAILED"
    assert "evidence" in exc.message
    assert exc.details == {"entity_type": "evidence", "reason": "OperationalError"}


def test_search_timeout_exception() -> None:
    """SearchTimeoutException with and without a branch."""
    overall = SearchTimeoutException(15.0)
    assert overall.error_code == "SEARCH_TIMEOUT"
    assert overall.details == {"timeout_seconds": 15.0}
    branch = SearchTimeoutException(10.0, "risk")
    assert branch.details == {"timeout_seconds": 10.0, "entity_type": "risk"}
    assert "risk" in branch.message
