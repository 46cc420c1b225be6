"""Relevance scoring, sorting, and pagination over SearchResults."""

from datetime import UTC, datetime, timedelta

import pytest

from app.application.dtos.search import CompanyMetadata, ProjectMetadata, SearchResult
from app.application.services.relevance import TITLE_MATCH_BONUS, relevance_score
from app.application.services.result_ordering import paginate, sort_results
from app.domain.enums import EntityKind, SortBy, SortOrder

_BASE = datetime(2024, 1, 1, tzinfo=UTC)


def _project(
    id: str,
    title: str = "Project",
    matched: tuple[str, ...] = ("description",),
    day: int = 0,
    updated_day: int | None = None,
) -> SearchResult:
    return SearchResult(
        id=id,
        entity_type=EntityKind.PROJECT,
        title=title,
        metadata=ProjectMetadata(status="active", stage="design"),
        matched_fields=matched,
        created_at=_BASE + timedelta(days=day),
        updated_at=_BASE + timedelta(days=updated_day) if updated_day is not None else None,
    )


def _results(n: int) -> list[SearchResult]:
    return [_project(f"p{i}", day=i) for i in range(n)]


class TestRelevanceScore:
    def test_title_match_gets_bonus(self) -> None:
        """A title match scores 1 + TITLE_MATCH_BONUS."""
        assert relevance_score(_project("p", matched=("title",))) == 1 + TITLE_MATCH_BONUS

    def test_name_match_gets_bonus(self) -> None:
        result = SearchResult(
            id="co",
            entity_type=EntityKind.COMPANY,
            title="Tower Supply Co",
            metadata=CompanyMetadata(type="supplier_vendor"),
            matched_fields=("name", "city"),
            created_at=_BASE,
        )
        assert relevance_score(result) == 4

    def test_no_bonus_without_primary_field(self) -> None:
        assert relevance_score(_project("p", matched=("description", "city"))) == 2


class TestSearchResultInvariants:
    def test_empty_matched_fields_rejected(self) -> None:
        with pytest.raises(ValueError):
            _project("p", matched=())

    def test_metadata_must_match_entity_type(self) -> None:
        with pytest.raises(TypeError):
            SearchResult(
                id="x",
                entity_type=EntityKind.CONTACT,
                title="x",
                metadata=ProjectMetadata(status="active", stage="design"),
                matched_fields=("name",),
                created_at=_BASE,
            )


class TestSortResults:
    def test_relevance_desc_is_non_increasing(self) -> None:
        results = [
            _project("a", matched=("city",)),
            _project("b", matched=("title", "city")),
            _project("c", matched=("description", "address", "city")),
        ]
        ordered = sort_results(results, SortBy.RELEVANCE, SortOrder.DESC)
        scores = [relevance_score(r) for r in ordered]
        assert scores == sorted(scores, reverse=True)
        assert [r.id for r in ordered] == ["b", "c", "a"]

    def test_ties_keep_merge_order_in_both_directions(self) -> None:
        """Stable sort: equal keys keep their input order for asc and desc."""
        results = [_project("first"), _project("second"), _project("third")]
        for order in (SortOrder.ASC, SortOrder.DESC):
            ordered = sort_results(results, SortBy.RELEVANCE, order)
            assert [r.id for r in ordered] == ["first", "second", "third"]

    def test_title_asc_is_non_decreasing(self) -> None:
        results = [_project("1", title="b"), _project("2", title="C"), _project("3", title="a")]
        ordered = sort_results(results, SortBy.TITLE, SortOrder.ASC)
        titles = [r.title for r in ordered]
        assert titles == sorted(titles)
        assert titles == ["C", "a", "b"]

    def test_name_sorts_on_display_title(self) -> None:
        results = [_project("1", title="Zeta"), _project("2", title="Alpha")]
        ordered = sort_results(results, SortBy.NAME, SortOrder.ASC)
        assert [r.title for r in ordered] == ["Alpha", "Zeta"]

    def test_created_at_desc(self) -> None:
        ordered = sort_results(_results(3), SortBy.CREATED_AT, SortOrder.DESC)
        assert [r.id for r in ordered] == ["p2", "p1", "p0"]

    def test_updated_at_falls_back_to_created_at(self) -> None:
        results = [
            _project("old-but-touched", day=0, updated_day=10),
            _project("never-updated", day=5),
        ]
        ordered = sort_results(results, SortBy.UPDATED_AT, SortOrder.DESC)
        assert [r.id for r in ordered] == ["old-but-touched", "never-updated"]

    def test_does_not_mutate_input(self) -> None:
        results = _results(3)
        sort_results(results, SortBy.CREATED_AT, SortOrder.DESC)
        assert [r.id for r in results] == ["p0", "p1", "p2"]


class TestPaginate:
    def test_last_partial_page(self) -> None:
        """offset 20, limit 20, total 25 -> 5 results, no more."""
        page = paginate(_results(25), offset=20, limit=20)
        assert len(page.items) == 5
        assert page.total_count == 25
        assert page.has_more is False

    def test_first_page(self) -> None:
        """offset 0, limit 10, total 25 -> 10 results, more available."""
        page = paginate(_results(25), offset=0, limit=10)
        assert [r.id for r in page.items] == [f"p{i}" for i in range(10)]
        assert page.total_count == 25
        assert page.has_more is True

    def test_offset_past_end_is_empty(self) -> None:
        page = paginate(_results(3), offset=10, limit=5)
        assert page.items == []
        assert page.total_count == 3
        assert page.has_more is False

    def test_exact_fit_has_no_more(self) -> None:
        page = paginate(_results(20), offset=10, limit=10)
        assert len(page.items) == 10
        assert page.has_more is False
