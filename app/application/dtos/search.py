"""DTOs for global search (no dependency on ORM).

SearchQuery is the request, SearchResult the normalized hit envelope,
SearchResponse the paginated answer. Per-entity filter objects replace
the untyped filter bag; see app.application.services.search_filters for
parsing and validation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.enums import (
    AISystemType,
    AssessmentStatus,
    EvidenceStatus,
    LifecycleStatus,
    RiskCategory,
    RiskTier,
    SearchEntityType,
    TreatmentStatus,
)

ALL_ENTITY_TYPES: tuple[SearchEntityType, ...] = tuple(SearchEntityType)


@dataclass(frozen=True)
class AISystemFilters:
    """Structured filters for AI systems (equality)."""

    system_type: AISystemType | None = None
    lifecycle_status: LifecycleStatus | None = None
    risk_tier: RiskTier | None = None


@dataclass(frozen=True)
class AssessmentFilters:
    """Structured filters for risk assessments (equality)."""

    status: AssessmentStatus | None = None
    framework_id: str | None = None


@dataclass(frozen=True)
class RiskFilters:
    """Structured filters for risks. min_residual_score is inclusive (>=)."""

    category: RiskCategory | None = None
    treatment_status: TreatmentStatus | None = None
    min_residual_score: float | None = None


@dataclass(frozen=True)
class EvidenceFilters:
    """Structured filters for evidence. mime_type is a substring match."""

    review_status: EvidenceStatus | None = None
    mime_type: str | None = None


EntityFilters = AISystemFilters | AssessmentFilters | RiskFilters | EvidenceFilters


@dataclass(frozen=True)
class SearchFilters:
    """Validated filters for every entity type; each only narrows its own type."""

    ai_system: AISystemFilters = field(default_factory=AISystemFilters)
    assessment: AssessmentFilters = field(default_factory=AssessmentFilters)
    risk: RiskFilters = field(default_factory=RiskFilters)
    evidence: EvidenceFilters = field(default_factory=EvidenceFilters)

    def for_entity(self, entity_type: SearchEntityType) -> EntityFilters:
        """Return the filter object for one entity type."""
        return getattr(self, entity_type.value)


@dataclass(frozen=True)
class SearchQuery:
    """Global search request (tenant-scoped).

    filters may be a SearchFilters or a raw key/value mapping; raw
    mappings are validated by SearchService before any lookup runs.
    """

    query: str
    organization_id: str
    entity_types: tuple[SearchEntityType, ...] = ALL_ENTITY_TYPES
    page: int = 1
    page_size: int = 20
    filters: SearchFilters | dict[str, Any] = field(default_factory=SearchFilters)


@dataclass(frozen=True)
class SearchResult:
    """Single search hit. Identity is (entity_type, id)."""

    entity_type: SearchEntityType
    id: str
    title: str
    snippet: str  # HTML-escaped; only <mark> tags are markup
    relevance: float
    metadata: dict[str, Any]


@dataclass(frozen=True)
class SearchResponse:
    """Page of results sorted by relevance; total counts all candidates before paging."""

    results: list[SearchResult]
    total: int
    page: int
    page_size: int
    query_time: float  # milliseconds


# Read-models returned by the record store (projection of the searched tables).


@dataclass(frozen=True)
class AISystemRecord:
    id: str
    organization_id: str
    name: str
    description: str | None
    purpose: str | None
    system_type: str
    lifecycle_status: str
    risk_tier: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class AssessmentRecord:
    id: str
    organization_id: str
    title: str
    description: str | None
    status: str
    assessment_date: datetime | None
    ai_system_name: str
    framework_name: str


@dataclass(frozen=True)
class RiskRecord:
    id: str
    organization_id: str  # owning assessment's organization
    title: str
    description: str | None
    treatment_plan: str | None
    category: str
    residual_score: float
    treatment_status: str
    assessment_title: str
    ai_system_name: str


@dataclass(frozen=True)
class EvidenceRecord:
    id: str
    organization_id: str
    filename: str
    original_name: str
    description: str | None
    mime_type: str
    file_size: int
    review_status: str
    uploaded_by: str | None
    created_at: datetime | None
