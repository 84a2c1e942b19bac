"""Timezone normalisation for datetimes read back from the database."""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as a UTC-aware datetime.

    SQLite hands back naive values for timezone columns; those are taken to
    already be UTC. Aware values are converted. None passes through.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
