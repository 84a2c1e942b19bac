"""API v1 dependencies. Re-exported for endpoint modules."""

from app.api.v1.dependencies.db import get_db, get_search_session_factory
from app.api.v1.dependencies.organization import (
    get_organization_id,
    get_organization_repo,
)
from app.api.v1.dependencies.search import (
    get_search_record_store,
    get_search_service,
)

__all__ = [
    "get_db",
    "get_search_session_factory",
    "get_organization_id",
    "get_organization_repo",
    "get_search_record_store",
    "get_search_service",
]
