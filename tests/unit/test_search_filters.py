"""parse_search_filters: typed per-entity filters from the flat filter map."""

import pytest

from app.application.dtos.search import (
    AISystemFilters,
    EvidenceFilters,
    RiskFilters,
    SearchFilters,
)
from app.application.services.search_filters import parse_search_filters
from app.domain.enums import (
    AISystemType,
    AssessmentStatus,
    EvidenceStatus,
    LifecycleStatus,
    RiskCategory,
    RiskTier,
    SearchEntityType,
)
from app.domain.exceptions import FilterValidationException


class TestParseSearchFilters:
    def test_none_and_empty_give_no_filters(self) -> None:
        assert parse_search_filters(None) == SearchFilters()
        assert parse_search_filters({}) == SearchFilters()

    def test_routes_keys_to_their_entity(self) -> None:
        filters = parse_search_filters(
            {
                "systemType": "ML",
                "lifecycleStatus": "PRODUCTION",
                "riskTier": "HIGH",
                "status": "APPROVED",
                "frameworkId": "fw1",
                "category": "PRIVACY",
                "minResidualScore": 5,
                "reviewStatus": "APPROVED",
                "mimeType": "pdf",
            }
        )
        assert filters.ai_system == AISystemFilters(
            system_type=AISystemType.ML,
            lifecycle_status=LifecycleStatus.PRODUCTION,
            risk_tier=RiskTier.HIGH,
        )
        assert filters.assessment.status is AssessmentStatus.APPROVED
        assert filters.assessment.framework_id == "fw1"
        assert filters.risk == RiskFilters(
            category=RiskCategory.PRIVACY, min_residual_score=5.0
        )
        assert filters.evidence == EvidenceFilters(
            review_status=EvidenceStatus.APPROVED, mime_type="pdf"
        )

    def test_snake_case_keys_accepted(self) -> None:
        filters = parse_search_filters(
            {"system_type": "GENAI", "min_residual_score": 2.5, "mime_type": "image/"}
        )
        assert filters.ai_system.system_type is AISystemType.GENAI
        assert filters.risk.min_residual_score == 2.5
        assert filters.evidence.mime_type == "image/"

    def test_null_values_treated_as_absent(self) -> None:
        filters = parse_search_filters({"riskTier": None, "category": None})
        assert filters == SearchFilters()

    def test_for_entity_returns_matching_filter_object(self) -> None:
        filters = parse_search_filters({"riskTier": "LOW"})
        assert filters.for_entity(SearchEntityType.AI_SYSTEM).risk_tier is RiskTier.LOW
        assert filters.for_entity(SearchEntityType.RISK) == RiskFilters()

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(FilterValidationException) as exc_info:
            parse_search_filters({"owner": "alice"})
        assert exc_info.value.error_code == "INVALID_FILTERS"
        assert exc_info.value.details["field"] == "owner"

    def test_invalid_enum_value_rejected(self) -> None:
        with pytest.raises(FilterValidationException) as exc_info:
            parse_search_filters({"riskTier": "CRITICAL"})
        assert exc_info.value.details["field"] == "riskTier"

    def test_enum_values_are_case_sensitive(self) -> None:
        with pytest.raises(FilterValidationException):
            parse_search_filters({"systemType": "ml"})

    def test_number_filter_rejects_string(self) -> None:
        with pytest.raises(FilterValidationException) as exc_info:
            parse_search_filters({"minResidualScore": "high"})
        assert exc_info.value.details["field"] == "minResidualScore"

    def test_number_filter_rejects_boolean(self) -> None:
        with pytest.raises(FilterValidationException):
            parse_search_filters({"minResidualScore": True})

    def test_number_filter_rejects_non_finite(self) -> None:
        with pytest.raises(FilterValidationException):
            parse_search_filters({"minResidualScore": float("inf")})

    def test_string_filter_rejects_empty_and_non_string(self) -> None:
        with pytest.raises(FilterValidationException):
            parse_search_filters({"mimeType": ""})
        with pytest.raises(FilterValidationException):
            parse_search_filters({"frameworkId": 42})

    def test_same_filter_in_both_spellings_rejected(self) -> None:
        with pytest.raises(FilterValidationException) as exc_info:
            parse_search_filters({"riskTier": "LOW", "risk_tier": "HIGH"})
        assert "twice" in exc_info.value.message

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(FilterValidationException):
            parse_search_filters(["riskTier", "LOW"])  # type: ignore[arg-type]
