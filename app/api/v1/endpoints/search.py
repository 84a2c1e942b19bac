"""Search API: relevance-ranked search across AI systems, assessments, risks, evidence."""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_organization_id, get_search_service
from app.application.dtos.search import ALL_ENTITY_TYPES, SearchQuery
from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.domain.enums import SearchEntityType
from app.domain.exceptions import (
    FilterValidationException,
    InvalidEntityTypeException,
    InvalidQueryException,
    ValidationException,
)
from app.schemas.search import SearchPageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_entity_types(raw: str | None) -> tuple[SearchEntityType, ...]:
    """Comma-separated types; unknown entries are dropped, none known is an error."""
    if not raw:
        return ALL_ENTITY_TYPES
    allowed = SearchEntityType.values()
    requested = [part.strip() for part in raw.split(",")]
    known = tuple(SearchEntityType(part) for part in requested if part in allowed)
    if not known:
        raise InvalidEntityTypeException(requested, allowed)
    return known


def _parse_positive_int(raw: str | None, name: str, default: int) -> int:
    """Integer clamped to >= 1; absent means default."""
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationException(f"{name} must be an integer", field=name) from None
    return max(1, value)


def _parse_filters(raw: str | None) -> dict[str, Any]:
    """JSON object of filters; validated further by the search service."""
    if not raw:
        return {}
    try:
        filters = json.loads(raw)
    except json.JSONDecodeError:
        raise FilterValidationException("Invalid filters JSON format") from None
    if filters is None:
        return {}
    if not isinstance(filters, dict):
        raise FilterValidationException("Filters must be a JSON object", value=filters)
    return filters


@router.get("", response_model=SearchPageResponse)
async def search(
    organization_id: Annotated[str, Depends(get_organization_id)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str | None = Query(None, description="Search text (required)"),
    entity_type: str | None = Query(
        None,
        alias="type",
        description="Comma-separated: ai_system,assessment,risk,evidence (default: all)",
    ),
    page: str | None = Query(None, description="Page number (default 1)"),
    page_size: str | None = Query(
        None, alias="pageSize", description="Results per page (default 20, max 100)"
    ),
    filters: str | None = Query(None, description="JSON-encoded filter object"),
) -> SearchPageResponse:
    """Search within the caller's organization; results sorted by relevance."""
    settings = get_settings()
    if q is None or not q.strip():
        raise InvalidQueryException("Search query is required")
    if len(q) > settings.search_max_query_length:
        raise InvalidQueryException(
            f"Search query too long (max {settings.search_max_query_length} characters)",
            error_code="QUERY_TOO_LONG",
            max_length=settings.search_max_query_length,
        )

    options = SearchQuery(
        query=q.strip(),
        organization_id=organization_id,
        entity_types=_parse_entity_types(entity_type),
        page=_parse_positive_int(page, "page", 1),
        page_size=min(
            _parse_positive_int(page_size, "pageSize", settings.search_default_page_size),
            settings.search_max_page_size,
        ),
        filters=_parse_filters(filters),
    )
    response = await search_svc.search(options)
    logger.info(
        "Search returned %d of %d results in %.1fms",
        len(response.results),
        response.total,
        response.query_time,
    )
    return SearchPageResponse.from_response(response)
