"""Settings validation (required DATABASE_URL, search limits)."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

DB_URL = "sqlite+aiosqlite:///:memory:"


def test_defaults() -> None:
    settings = Settings(database_url=DB_URL)
    assert settings.search_result_cap == 50
    assert settings.search_default_page_size == 20
    assert settings.search_max_page_size == 100
    assert settings.search_max_query_length == 200
    assert settings.organization_header_name == "X-Organization-ID"


def test_database_url_required(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(database_url="", _env_file=None)


def test_default_page_size_cannot_exceed_max() -> None:
    with pytest.raises(ValidationError, match="exceeds search_max_page_size"):
        Settings(
            database_url=DB_URL,
            search_default_page_size=50,
            search_max_page_size=10,
        )


def test_branch_timeout_cannot_exceed_overall() -> None:
    with pytest.raises(ValidationError, match="must not exceed"):
        Settings(
            database_url=DB_URL,
            search_branch_timeout_seconds=20.0,
            search_timeout_seconds=15.0,
        )


@pytest.mark.parametrize("field", ["search_result_cap", "search_max_page_size"])
def test_limits_must_be_positive(field: str) -> None:
    with pytest.raises(ValidationError):
        Settings(database_url=DB_URL, **{field: 0})
