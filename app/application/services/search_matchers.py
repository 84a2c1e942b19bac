"""Per-entity matchers for global search.

One generic EntityMatcher, configured per entity type with the store
lookup to call, the fields to score (title first), the snippet source and
the metadata projection. MATCHERS holds the four configurations in the
order the aggregator schedules them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from app.application.dtos.search import (
    AISystemRecord,
    AssessmentRecord,
    EntityFilters,
    EvidenceRecord,
    RiskRecord,
    SearchResult,
)
from app.application.services.relevance import calculate_relevance
from app.application.services.snippet import highlight_matches
from app.domain.enums import SearchEntityType

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISearchRecordStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class EntityMatcher(Generic[RecordT]):
    """Search one entity type: fetch from the store, then score, excerpt and shape.

    Attributes:
        entity_type: Tag put on every result.
        lookup: Name of the ISearchRecordStore method that fetches records.
        title: Display label of a record.
        scored_fields: Field values in priority order for relevance scoring.
        snippet_source: Text the snippet is cut from (with its fallback).
        metadata: Pass-through presentation data.
    """

    entity_type: SearchEntityType
    lookup: str
    title: Callable[[RecordT], str]
    scored_fields: Callable[[RecordT], list[str | None]]
    snippet_source: Callable[[RecordT], str]
    metadata: Callable[[RecordT], dict[str, Any]]

    async def search(
        self,
        store: ISearchRecordStore,
        query: str,
        organization_id: str,
        filters: EntityFilters,
        limit: int,
    ) -> list[SearchResult]:
        """Return unsorted results for records of organization_id matching query.

        Store errors propagate; the aggregator fails the whole search.
        """
        fetch = getattr(store, self.lookup)
        records: list[RecordT] = await fetch(organization_id, query, filters, limit)
        results: list[SearchResult] = []
        for record in records:
            if record.organization_id != organization_id:  # type: ignore[attr-defined]
                logger.error(
                    "Dropped %s %s: store returned a record outside organization %s",
                    self.entity_type.value,
                    record.id,  # type: ignore[attr-defined]
                    organization_id,
                )
                continue
            results.append(self.to_result(record, query))
        return results

    def to_result(self, record: RecordT, query: str) -> SearchResult:
        """Shape one record into the result envelope."""
        return SearchResult(
            entity_type=self.entity_type,
            id=record.id,  # type: ignore[attr-defined]
            title=self.title(record),
            snippet=highlight_matches(self.snippet_source(record), query),
            relevance=calculate_relevance(query, self.scored_fields(record)),
            metadata=self.metadata(record),
        )


AI_SYSTEM_MATCHER: EntityMatcher[AISystemRecord] = EntityMatcher(
    entity_type=SearchEntityType.AI_SYSTEM,
    lookup="find_ai_systems",
    title=lambda r: r.name,
    scored_fields=lambda r: [r.name, r.description, r.purpose],
    snippet_source=lambda r: r.description or r.purpose or "No description",
    metadata=lambda r: {
        "systemType": r.system_type,
        "lifecycleStatus": r.lifecycle_status,
        "riskTier": r.risk_tier,
        "createdAt": _iso(r.created_at),
    },
)

ASSESSMENT_MATCHER: EntityMatcher[AssessmentRecord] = EntityMatcher(
    entity_type=SearchEntityType.ASSESSMENT,
    lookup="find_assessments",
    title=lambda r: r.title,
    scored_fields=lambda r: [r.title, r.description, r.ai_system_name],
    snippet_source=lambda r: r.description or f"Assessment for {r.ai_system_name}",
    metadata=lambda r: {
        "status": r.status,
        "assessmentDate": _iso(r.assessment_date),
        "aiSystemName": r.ai_system_name,
        "frameworkName": r.framework_name,
    },
)

RISK_MATCHER: EntityMatcher[RiskRecord] = EntityMatcher(
    entity_type=SearchEntityType.RISK,
    lookup="find_risks",
    title=lambda r: r.title,
    scored_fields=lambda r: [r.title, r.description, r.treatment_plan],
    snippet_source=lambda r: r.description or "No description",
    metadata=lambda r: {
        "category": r.category,
        "residualScore": r.residual_score,
        "treatmentStatus": r.treatment_status,
        "assessmentTitle": r.assessment_title,
        "aiSystemName": r.ai_system_name,
    },
)

EVIDENCE_MATCHER: EntityMatcher[EvidenceRecord] = EntityMatcher(
    entity_type=SearchEntityType.EVIDENCE,
    lookup="find_evidence",
    title=lambda r: r.original_name,
    scored_fields=lambda r: [r.original_name, r.filename, r.description],
    snippet_source=lambda r: r.description or f"File: {r.filename}",
    metadata=lambda r: {
        "filename": r.filename,
        "mimeType": r.mime_type,
        "fileSize": r.file_size,
        "reviewStatus": r.review_status,
        "uploadedBy": r.uploaded_by,
        "createdAt": _iso(r.created_at),
    },
)

MATCHERS: dict[SearchEntityType, EntityMatcher[Any]] = {
    m.entity_type: m
    for m in (AI_SYSTEM_MATCHER, ASSESSMENT_MATCHER, RISK_MATCHER, EVIDENCE_MATCHER)
}
