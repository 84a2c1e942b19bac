"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
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
    )


class IOrganizationRepository(Protocol):
    """Protocol for organization (tenant) lookups."""

    async def get_by_id(self, organization_id: str) -> OrganizationResult | None:
        """Return organization by ID, or None."""


class ISearchRecordStore(Protocol):
    """Protocol for the tenant-scoped lookups behind global search.

    Every method matches records of organization_id where any searched
    text field contains query (case-insensitive, literal), narrows by the
    given filters, and returns at most limit records in store order.
    """

    async def find_ai_systems(
        self,
        organization_id: str,
        query: str,
        filters: AISystemFilters,
        limit: int,
    ) -> list[AISystemRecord]:
        """Match name, description, purpose."""

    async def find_assessments(
        self,
        organization_id: str,
        query: str,
        filters: AssessmentFilters,
        limit: int,
    ) -> list[AssessmentRecord]:
        """Match title, description."""

    async def find_risks(
        self,
        organization_id: str,
        query: str,
        filters: RiskFilters,
        limit: int,
    ) -> list[RiskRecord]:
        """Match title, description, treatment_plan; tenant via owning assessment."""

    async def find_evidence(
        self,
        organization_id: str,
        query: str,
        filters: EvidenceFilters,
        limit: int,
    ) -> list[EvidenceRecord]:
        """Match filename, original_name, description."""
