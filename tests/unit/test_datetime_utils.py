"""ensure_utc normalisation of database datetimes."""

from datetime import UTC, datetime, timedelta, timezone

from app.shared.utils import ensure_utc


def test_none_passes_through() -> None:
    assert ensure_utc(None) is None


def test_naive_value_is_taken_as_utc() -> None:
    result = ensure_utc(datetime(2025, 3, 1, 9, 0))
    assert result == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
    assert result.tzinfo is UTC


def test_aware_value_is_converted() -> None:
    kampala = timezone(timedelta(hours=3))
    result = ensure_utc(datetime(2025, 3, 1, 12, 0, tzinfo=kampala))
    assert result == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
    assert result.utcoffset() == timedelta(0)
