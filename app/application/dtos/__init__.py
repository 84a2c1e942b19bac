"""Application DTOs (no ORM dependency)."""

from app.application.dtos.organization import OrganizationResult
from app.application.dtos.search import (
    AISystemFilters,
    AISystemRecord,
    AssessmentFilters,
    AssessmentRecord,
    EvidenceFilters,
    EvidenceRecord,
    RiskFilters,
    RiskRecord,
    SearchFilters,
    SearchQuery,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "AISystemFilters",
    "AISystemRecord",
    "AssessmentFilters",
    "AssessmentRecord",
    "EvidenceFilters",
    "EvidenceRecord",
    "OrganizationResult",
    "RiskFilters",
    "RiskRecord",
    "SearchFilters",
    "SearchQuery",
    "SearchResponse",
    "SearchResult",
]
