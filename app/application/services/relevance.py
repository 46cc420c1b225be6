"""Relevance scoring for search results.

The score rewards multi-field matches and, more strongly, a match on the
record's primary display field. TITLE_MATCH_BONUS is the only tuning knob.
"""

from app.application.dtos.search import SearchResult

TITLE_MATCH_BONUS = 2
PRIMARY_NAME_FIELDS = frozenset({"title", "name"})


def relevance_score(result: SearchResult) -> int:
    """Return len(matched_fields) plus TITLE_MATCH_BONUS when title or name matched."""
    bonus = TITLE_MATCH_BONUS if PRIMARY_NAME_FIELDS.intersection(result.matched_fields) else 0
    return len(result.matched_fields) + bonus
