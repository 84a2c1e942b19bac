"""Global search use case: concurrent fan-out over entity matchers, merge, rank, paginate.

One asyncio task per requested entity type. The join is all-or-nothing:
when any branch fails or times out, the other branches are cancelled and
awaited before the error surfaces, and no partial result is returned.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.application.dtos.search import (
    SearchFilters,
    SearchQuery,
    SearchResponse,
    SearchResult,
)
from app.application.services.search_filters import parse_search_filters
from app.application.services.search_matchers import MATCHERS, EntityMatcher
from app.domain.enums import SearchEntityType
from app.domain.exceptions import (
    AirmException,
    SearchFailedException,
    SearchTimeoutException,
    ValidationException,
)
from app.shared.telemetry.tracing import TracedOperation, add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISearchRecordStore

logger = logging.getLogger(__name__)

DEFAULT_RESULT_CAP = 50


class SearchService:
    """Relevance-ranked search across AI systems, assessments, risks and evidence (tenant-scoped)."""

    def __init__(
        self,
        record_store: "ISearchRecordStore",
        *,
        result_cap: int = DEFAULT_RESULT_CAP,
        branch_timeout_seconds: float | None = None,
        timeout_seconds: float | None = None,
        matchers: Mapping[SearchEntityType, EntityMatcher[Any]] | None = None,
    ) -> None:
        """Initialize with the record store and limits.

        Args:
            record_store: Tenant-scoped lookups (ISearchRecordStore).
            result_cap: Max raw records fetched per entity type.
            branch_timeout_seconds: Budget for one entity lookup; None = unbounded.
            timeout_seconds: Budget for the whole fan-out; None = unbounded.
            matchers: Matcher per entity type (defaults to MATCHERS).
        """
        self.record_store = record_store
        self.result_cap = result_cap
        self.branch_timeout_seconds = branch_timeout_seconds
        self.timeout_seconds = timeout_seconds
        self.matchers = matchers if matchers is not None else MATCHERS

    @traced("search.global")
    async def search(self, options: SearchQuery) -> SearchResponse:
        """Search within the organization and return one page of ranked results.

        An empty (or whitespace) query returns an empty response without
        touching the store. Filters are validated before any lookup.

        Raises:
            ValidationException: page or page_size < 1.
            FilterValidationException: filters malformed.
            SearchFailedException: a lookup failed (identifies the entity type).
            SearchTimeoutException: a lookup or the whole search ran out of time.
        """
        started = time.perf_counter()
        page, page_size = options.page, options.page_size
        if page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if page_size < 1:
            raise ValidationException("page_size must be >= 1", field="page_size")

        filters = (
            options.filters
            if isinstance(options.filters, SearchFilters)
            else parse_search_filters(options.filters)
        )
        query = options.query.strip()
        entity_types = [et for et in self.matchers if et in set(options.entity_types)]
        if not query or not entity_types:
            return SearchResponse(
                results=[],
                total=0,
                page=page,
                page_size=page_size,
                query_time=self._elapsed_ms(started),
            )

        candidates = await self._fan_out(
            query, options.organization_id, filters, entity_types
        )
        # Stable: ties keep matcher order, then store order.
        candidates.sort(key=lambda r: r.relevance, reverse=True)
        total = len(candidates)
        offset = (page - 1) * page_size
        results = candidates[offset : offset + page_size]
        query_time = self._elapsed_ms(started)

        add_span_attributes(
            **{
                "search.entity_types": ",".join(et.value for et in entity_types),
                "search.total": total,
                "search.page": page,
            }
        )
        logger.debug(
            "Search organization=%s types=%s total=%d page=%d took %.1fms",
            options.organization_id,
            ",".join(et.value for et in entity_types),
            total,
            page,
            query_time,
        )
        return SearchResponse(
            results=results,
            total=total,
            page=page,
            page_size=page_size,
            query_time=query_time,
        )

    async def _fan_out(
        self,
        query: str,
        organization_id: str,
        filters: SearchFilters,
        entity_types: list[SearchEntityType],
    ) -> list[SearchResult]:
        """Run one branch per entity type concurrently; all-or-nothing join."""
        tasks = [
            asyncio.create_task(
                self._run_branch(et, query, organization_id, filters),
                name=f"search:{et.value}",
            )
            for et in entity_types
        ]
        try:
            async with asyncio.timeout(self.timeout_seconds):
                _, pending = await asyncio.wait(
                    tasks, return_when=asyncio.FIRST_EXCEPTION
                )
        except TimeoutError:
            await _cancel_and_wait(tasks)
            logger.warning(
                "Search timed out after %ss (organization=%s)",
                self.timeout_seconds,
                organization_id,
            )
            raise SearchTimeoutException(self.timeout_seconds) from None
        except asyncio.CancelledError:
            await _cancel_and_wait(tasks)
            raise

        if pending:
            await _cancel_and_wait(pending)
        # Read every finished branch's exception so none is left unretrieved.
        errors = [t.exception() for t in tasks if t.done() and not t.cancelled()]
        for error in errors:
            if error is not None:
                raise error
        return [result for task in tasks for result in task.result()]

    async def _run_branch(
        self,
        entity_type: SearchEntityType,
        query: str,
        organization_id: str,
        filters: SearchFilters,
    ) -> list[SearchResult]:
        """Search one entity type, mapping store errors to SearchFailedException."""
        matcher = self.matchers[entity_type]
        async with TracedOperation(
            f"search.{entity_type.value}", {"search.entity_type": entity_type.value}
        ):
            try:
                async with asyncio.timeout(self.branch_timeout_seconds):
                    return await matcher.search(
                        self.record_store,
                        query,
                        organization_id,
                        filters.for_entity(entity_type),
                        self.result_cap,
                    )
            except TimeoutError:
                logger.warning(
                    "Search branch %s timed out after %ss",
                    entity_type.value,
                    self.branch_timeout_seconds,
                )
                raise SearchTimeoutException(
                    self.branch_timeout_seconds or 0.0, entity_type.value
                ) from None
            except AirmException:
                raise
            except Exception as exc:
                logger.exception("Search branch %s failed", entity_type.value)
                raise SearchFailedException(
                    entity_type.value, type(exc).__name__
                ) from exc

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000.0


async def _cancel_and_wait(tasks: "set[asyncio.Task[Any]] | list[asyncio.Task[Any]]") -> None:
    """Cancel tasks and wait until every one of them has finished."""
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
