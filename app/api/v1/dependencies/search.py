"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.infrastructure.persistence.repositories import SqlSearchRecordStore

from .db import get_search_session_factory


async def get_search_record_store(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_search_session_factory)
    ],
) -> SqlSearchRecordStore:
    """Record store for global search (read-only, session per lookup)."""
    return SqlSearchRecordStore(session_factory)


async def get_search_service(
    record_store: Annotated[SqlSearchRecordStore, Depends(get_search_record_store)],
) -> SearchService:
    """Global search use case with configured cap and timeouts."""
    settings = get_settings()
    return SearchService(
        record_store,
        result_cap=settings.search_result_cap,
        branch_timeout_seconds=settings.search_branch_timeout_seconds,
        timeout_seconds=settings.search_timeout_seconds,
    )
