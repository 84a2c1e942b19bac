"""API request/response schemas (pydantic)."""

from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.search import SearchPageResponse, SearchResultResponse

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
    "SearchPageResponse",
    "SearchResultResponse",
]
