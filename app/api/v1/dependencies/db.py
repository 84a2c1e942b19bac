"""DB dependencies (composition root)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.infrastructure.persistence.database import get_db, get_session_factory


def get_search_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for the search store (one session per concurrent lookup)."""
    return get_session_factory()


__all__ = ["get_db", "get_search_session_factory"]
