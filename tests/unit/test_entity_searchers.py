"""Entity searcher tests: matched-field provenance, filters, date range, mapping."""

from datetime import UTC, datetime
from decimal import Decimal

from app.application.dtos.search import (
    CompanyFilters,
    ContactFilters,
    DateRange,
    DocumentFilters,
    DocumentMetadata,
    ProjectFilters,
    ProjectMetadata,
)
from app.domain.enums import EntityKind

_ANY_DATE = DateRange()


class TestProjectSearcher:
    async def test_title_match_maps_full_result(self, searchers) -> None:
        """'Tower' matches the project title only and maps metadata and subtitle."""
        results = await searchers[EntityKind.PROJECT].search(
            "Tower", ProjectFilters(), _ANY_DATE
        )
        assert [r.id for r in results] == ["p1"]
        result = results[0]
        assert result.entity_type is EntityKind.PROJECT
        assert result.matched_fields == ("title",)
        assert result.subtitle == "active • construction • Springfield"
        assert result.description == "Twenty-story office building"
        assert result.metadata == ProjectMetadata(
            status="active",
            stage="construction",
            budget=Decimal("2500000.00"),
            address="100 Main St",
            city="Springfield",
            created_by="Alice Admin",
        )

    async def test_match_is_case_insensitive(self, searchers) -> None:
        results = await searchers[EntityKind.PROJECT].search(
            "SPRINGFIELD", ProjectFilters(), _ANY_DATE
        )
        assert [(r.id, r.matched_fields) for r in results] == [("p1", ("city",))]

    async def test_subtitle_skips_missing_city(self, searchers) -> None:
        results = await searchers[EntityKind.PROJECT].search(
            "riverside", ProjectFilters(), _ANY_DATE
        )
        assert results[0].subtitle == "planning • design • Shelbyville"

    async def test_status_filter_excludes_other_statuses(self, searchers) -> None:
        """Rows failing the status filter are dropped even if the store returned them."""
        results = await searchers[EntityKind.PROJECT].search(
            "e", ProjectFilters(statuses=("planning",)), _ANY_DATE
        )
        assert [r.id for r in results] == ["p2"]

    async def test_stage_filter(self, searchers) -> None:
        results = await searchers[EntityKind.PROJECT].search(
            "e", ProjectFilters(stages=("construction",)), _ANY_DATE
        )
        assert [r.id for r in results] == ["p1"]

    async def test_date_range_is_inclusive(self, searchers) -> None:
        """A bound equal to created_at keeps the row."""
        exact = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)
        results = await searchers[EntityKind.PROJECT].search(
            "e", ProjectFilters(), DateRange(date_from=exact, date_to=exact)
        )
        assert [r.id for r in results] == ["p1"]

    async def test_date_range_excludes_outside_rows(self, searchers) -> None:
        results = await searchers[EntityKind.PROJECT].search(
            "e",
            ProjectFilters(),
            DateRange(date_from=datetime(2024, 6, 1, tzinfo=UTC)),
        )
        assert [r.id for r in results] == ["p2"]

    async def test_rows_without_a_match_are_dropped(self, searchers) -> None:
        results = await searchers[EntityKind.PROJECT].search(
            "no such text", ProjectFilters(), _ANY_DATE
        )
        assert results == []

    async def test_store_receives_query_filters_and_range(
        self, searchers, record_stores
    ) -> None:
        filters = ProjectFilters(statuses=("active",))
        await searchers[EntityKind.PROJECT].search("Tower", filters, _ANY_DATE)
        assert record_stores[EntityKind.PROJECT].calls == [("Tower", filters, _ANY_DATE)]


class TestContactSearcher:
    async def test_company_name_match_is_labelled_company(self, searchers) -> None:
        results = await searchers[EntityKind.CONTACT].search(
            "tower", ContactFilters(), _ANY_DATE
        )
        assert [(r.id, r.matched_fields) for r in results] == [("c1", ("company",))]
        assert results[0].subtitle == "project_manager • Project Manager • Tower Supply Co"
        assert results[0].description == "jane@supplyco.example"
        assert results[0].metadata.company_id == "co1"

    async def test_fields_follow_declared_order(self, searchers) -> None:
        results = await searchers[EntityKind.CONTACT].search(
            "acme", ContactFilters(), _ANY_DATE
        )
        assert [(r.id, r.matched_fields) for r in results] == [
            ("c2", ("email", "company"))
        ]

    async def test_role_filter(self, searchers) -> None:
        results = await searchers[EntityKind.CONTACT].search(
            "o", ContactFilters(roles=("executive",)), _ANY_DATE
        )
        assert [r.id for r in results] == ["c2"]


class TestCompanySearcher:
    async def test_name_match(self, searchers) -> None:
        results = await searchers[EntityKind.COMPANY].search(
            "Tower", CompanyFilters(), _ANY_DATE
        )
        assert [(r.id, r.matched_fields) for r in results] == [("co1", ("name",))]
        assert results[0].subtitle == "supplier_vendor • Springfield"
        assert results[0].description is None

    async def test_type_filter(self, searchers) -> None:
        results = await searchers[EntityKind.COMPANY].search(
            "co", CompanyFilters(types=("contractor",)), _ANY_DATE
        )
        assert [r.id for r in results] == ["co2"]


class TestDocumentSearcher:
    async def test_tags_and_version_notes_match(self, searchers) -> None:
        results = await searchers[EntityKind.DOCUMENT].search(
            "tower", DocumentFilters(), _ANY_DATE
        )
        assert [(r.id, r.matched_fields) for r in results] == [
            ("d1", ("tags", "versionNotes"))
        ]
        result = results[0]
        assert result.subtitle == "drawings_plans • v2 • Downtown Corporate Tower"
        assert result.metadata == DocumentMetadata(
            type="drawings_plans",
            current_version="2",
            tags=["plans", "tower"],
            project_id="p1",
            project_title="Downtown Corporate Tower",
            created_by="Alice Admin",
            file_name="site-plan-v2.pdf",
            file_size="1024",
        )

    async def test_file_name_match(self, searchers) -> None:
        results = await searchers[EntityKind.DOCUMENT].search(
            ".PDF", DocumentFilters(), _ANY_DATE
        )
        assert {r.id: r.matched_fields for r in results} == {
            "d1": ("fileName",),
            "d2": ("fileName",),
        }

    async def test_invalid_tags_decode_to_empty_list(self, searchers) -> None:
        results = await searchers[EntityKind.DOCUMENT].search(
            "acme", DocumentFilters(), _ANY_DATE
        )
        assert [r.id for r in results] == ["d2"]
        assert results[0].metadata.tags == []
        assert results[0].subtitle == "contracts • v1"

    async def test_type_filter(self, searchers) -> None:
        results = await searchers[EntityKind.DOCUMENT].search(
            "pdf", DocumentFilters(types=("contracts",)), _ANY_DATE
        )
        assert [r.id for r in results] == ["d2"]
