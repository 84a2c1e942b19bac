"""Application services: relevance scoring, snippet highlighting, filter parsing, entity matchers."""

from app.application.services.relevance import calculate_relevance
from app.application.services.search_filters import parse_search_filters
from app.application.services.search_matchers import MATCHERS, EntityMatcher
from app.application.services.snippet import escape_html, highlight_matches

__all__ = [
    "MATCHERS",
    "EntityMatcher",
    "calculate_relevance",
    "escape_html",
    "highlight_matches",
    "parse_search_filters",
]
