"""Organization repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.organization import OrganizationResult
from app.infrastructure.persistence.models.organization import Organization


def _organization_to_result(o: Organization) -> OrganizationResult:
    """Map ORM Organization to application OrganizationResult."""
    return OrganizationResult(id=o.id, name=o.name, slug=o.slug)


class OrganizationRepository:
    """Organization (tenant) lookups."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, organization_id: str) -> OrganizationResult | None:
        result = await self.db.execute(
            select(Organization).where(Organization.id == organization_id)
        )
        organization = result.scalar_one_or_none()
        return _organization_to_result(organization) if organization else None
