"""Shared utilities: datetime normalisation and ID generators."""

from app.shared.utils.datetime import ensure_utc
from app.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "ensure_utc",
]
