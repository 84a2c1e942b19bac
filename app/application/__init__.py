"""Application layer: DTOs, interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (record store, organization repo).
"""

from app.application.interfaces import IOrganizationRepository, ISearchRecordStore
from app.application.use_cases.search import SearchService

__all__ = [
    "IOrganizationRepository",
    "ISearchRecordStore",
    "SearchService",
]
