"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.organization_repo import (
    OrganizationRepository,
)
from app.infrastructure.persistence.repositories.search_repo import (
    SqlSearchRecordStore,
)

__all__ = [
    "OrganizationRepository",
    "SqlSearchRecordStore",
]
