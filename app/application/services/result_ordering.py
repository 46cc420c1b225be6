"""Sorting and pagination over the merged result list (pure, in-memory)."""

from collections.abc import Callable, Sequence
from typing import Any

from app.application.dtos.search import Page, SearchResult
from app.application.services.relevance import relevance_score
from app.domain.enums import SortBy, SortOrder


def _updated_or_created(result: SearchResult) -> Any:
    return result.updated_at or result.created_at


_SORT_KEYS: dict[SortBy, Callable[[SearchResult], Any]] = {
    SortBy.RELEVANCE: relevance_score,
    SortBy.CREATED_AT: lambda r: r.created_at,
    SortBy.UPDATED_AT: _updated_or_created,
    SortBy.NAME: lambda r: r.title,
    SortBy.TITLE: lambda r: r.title,
}


def sort_results(
    results: Sequence[SearchResult],
    sort_by: SortBy = SortBy.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[SearchResult]:
    """Return a new list ordered by sort_by; desc inverts. Stable in both directions.

    Name/title compare ordinally (no locale folding). updated_at falls back to
    created_at. Must run on the full candidate set before pagination.
    """
    key = _SORT_KEYS[SortBy(sort_by)]
    return sorted(results, key=key, reverse=SortOrder(sort_order) == SortOrder.DESC)


def paginate(results: Sequence[SearchResult], offset: int, limit: int) -> Page:
    """Slice results[offset:offset+limit]; has_more when offset+limit < total."""
    total = len(results)
    return Page(
        items=list(results[offset : offset + limit]),
        total_count=total,
        has_more=offset + limit < total,
    )
