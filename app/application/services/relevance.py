"""Relevance scoring for search hits.

Score is additive per field (exact match, substring, per-word hits) with a
positional decay applied to the running total after every non-empty field.
The decay compounds: earlier fields are discounted again by each later
field, so the final weight of field 0 depends on how many fields follow.
"""

EXACT_MATCH_SCORE = 100.0
SUBSTRING_MATCH_SCORE = 50.0
WORD_MATCH_SCORE = 10.0


def calculate_relevance(query: str, fields: list[str | None]) -> float:
    """Score how well query matches fields, ordered title first.

    Args:
        query: Search text (matched case-insensitively).
        fields: Field values in priority order; None or "" contribute nothing
            and do not apply the decay step.

    Returns:
        Non-negative score with no fixed upper bound; 0.0 when query is empty.
    """
    lower_query = query.lower()
    if not lower_query:
        return 0.0
    words = lower_query.split()
    field_count = len(fields)
    score = 0.0

    for index, value in enumerate(fields):
        if not value:
            continue
        lower_field = value.lower()
        if lower_field == lower_query:
            score += EXACT_MATCH_SCORE
        if lower_query in lower_field:
            score += SUBSTRING_MATCH_SCORE
        for word in words:
            if word in lower_field:
                score += WORD_MATCH_SCORE
        score *= (field_count - index) / field_count

    return score
