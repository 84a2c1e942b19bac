"""DTOs for organizations (tenants)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrganizationResult:
    """Organization read-model (tenant root)."""

    id: str
    name: str
    slug: str
