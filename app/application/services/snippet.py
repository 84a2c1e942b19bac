"""Snippet extraction with match highlighting, safe to render as HTML.

Every character taken from the input text is HTML-escaped; the literal
<mark>/</mark> tags are the only markup ever emitted.
"""

import html
import re

CONTEXT_BEFORE = 50
CONTEXT_AFTER = 100
NO_MATCH_LENGTH = 150
ELLIPSIS = "..."
MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' as HTML entities."""
    return html.escape(text, quote=True)


def highlight_matches(text: str | None, query: str | None) -> str:
    """Return a context window around the first match of query with the match marked.

    Args:
        text: Free text to excerpt (None treated as "").
        query: Search text, matched case-insensitively and literally.

    Returns:
        - "" or the escaped text when text or query is empty.
        - Without a match: the escaped first 150 characters, with "..." when truncated.
        - With a match: up to 50 characters before and 100 after the match,
          "..." on each clipped side, and the match wrapped in <mark></mark>.
    """
    if not text or not query:
        return escape_html(text or "")

    found = re.search(re.escape(query), text, flags=re.IGNORECASE)
    if found is None:
        if len(text) > NO_MATCH_LENGTH:
            return escape_html(text[:NO_MATCH_LENGTH] + ELLIPSIS)
        return escape_html(text)

    match_start, match_end = found.span()
    start = max(0, match_start - CONTEXT_BEFORE)
    end = min(len(text), match_end + CONTEXT_AFTER)

    before = escape_html(text[start:match_start])
    matched = escape_html(text[match_start:match_end])
    after = escape_html(text[match_end:end])

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(text) else ""
    return f"{prefix}{before}{MARK_OPEN}{matched}{MARK_CLOSE}{after}{suffix}"
