"""Search API schemas. JSON keys are camelCase (entityType, pageSize, queryTime)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.search import SearchResponse, SearchResult
from app.domain.enums import SearchEntityType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResultResponse(_CamelModel):
    """Single search hit (AI system, assessment, risk, or evidence)."""

    entity_type: SearchEntityType = Field(
        ..., description="ai_system | assessment | risk | evidence"
    )
    id: str
    title: str
    snippet: str = Field(
        ..., description="HTML-escaped excerpt; only <mark> tags are markup"
    )
    relevance: float
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            entity_type=result.entity_type,
            id=result.id,
            title=result.title,
            snippet=result.snippet,
            relevance=result.relevance,
            metadata=result.metadata,
        )


class SearchPageResponse(_CamelModel):
    """Paginated global search response."""

    success: bool = True
    data: list[SearchResultResponse]
    total: int = Field(..., description="Candidates across all types before paging")
    page: int
    page_size: int
    query_time: float = Field(..., description="Milliseconds spent in search")

    @classmethod
    def from_response(cls, response: SearchResponse) -> "SearchPageResponse":
        return cls(
            data=[SearchResultResponse.from_result(r) for r in response.results],
            total=response.total,
            page=response.page,
            page_size=response.page_size,
            query_time=response.query_time,
        )
