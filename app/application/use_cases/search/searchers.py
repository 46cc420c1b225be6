"""Entity searchers: one per record kind.

Each searcher asks its record store for candidates, then re-checks the
text match and structured filters on every row. Only rows with at least
one matched field become SearchResults; matched_fields follow the
searcher's declared field order.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from app.application.dtos.search import (
    CompanyFilters,
    CompanyMetadata,
    CompanyRecord,
    ContactFilters,
    ContactMetadata,
    ContactRecord,
    DateRange,
    DocumentFilters,
    DocumentMetadata,
    DocumentRecord,
    ProjectFilters,
    ProjectMetadata,
    ProjectRecord,
    SearchResult,
)
from app.domain.enums import EntityKind
from app.shared.telemetry.tracing import TracedOperation
from app.shared.utils.datetime import ensure_utc

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        ICompanyRecordStore,
        IContactRecordStore,
        IDocumentRecordStore,
        IProjectRecordStore,
    )

SUBTITLE_SEPARATOR = " • "


def _subtitle(*parts: str | None) -> str:
    """Join non-empty parts with the subtitle separator."""
    return SUBTITLE_SEPARATOR.join(p for p in parts if p)


def _allowed(value: str, allowed: tuple[str, ...]) -> bool:
    """Empty allow-list means no restriction."""
    return not allowed or value in allowed


RecordT = TypeVar("RecordT")
FiltersT = TypeVar("FiltersT")


class EntitySearcher(Generic[RecordT, FiltersT]):
    """Base searcher: candidate fetch, provenance, filter re-check, result mapping.

    Subclasses declare entity_kind and searchable_fields, and implement
    _passes_filters and _to_result.
    """

    entity_kind: EntityKind
    searchable_fields: tuple[tuple[str, Callable[[Any], str | None]], ...] = ()

    def __init__(self, store: Any) -> None:
        self.store = store

    async def search(
        self, query: str, filters: FiltersT, date_range: DateRange
    ) -> list[SearchResult]:
        """Return matches for query (case-insensitive substring) that pass filters and date_range."""
        async with TracedOperation(
            f"search.{self.entity_kind.value}",
            {"search.entity_kind": self.entity_kind.value},
        ) as op:
            records: list[RecordT] = await self.store.find_matching(
                query, filters, date_range
            )
            needle = query.lower()
            results: list[SearchResult] = []
            for record in records:
                if not self._passes_filters(record, filters):
                    continue
                if not date_range.contains(ensure_utc(record.created_at)):
                    continue
                matched = self.matched_fields(record, needle)
                if not matched:
                    continue
                results.append(self._to_result(record, matched))
            if op.span is not None:
                op.span.set_attribute("search.candidates", len(records))
                op.span.set_attribute("search.results", len(results))
            return results

    def matched_fields(self, record: RecordT, needle: str) -> tuple[str, ...]:
        """Return labels of searchable fields containing needle (already lowercased)."""
        matched = []
        for label, getter in self.searchable_fields:
            value = getter(record)
            if value and needle in value.lower():
                matched.append(label)
        return tuple(matched)

    def _passes_filters(self, record: RecordT, filters: FiltersT) -> bool:
        raise NotImplementedError

    def _to_result(self, record: RecordT, matched: tuple[str, ...]) -> SearchResult:
        raise NotImplementedError


class ProjectSearcher(EntitySearcher[ProjectRecord, ProjectFilters]):
    """Projects: title, description, address, city."""

    entity_kind = EntityKind.PROJECT
    searchable_fields = (
        ("title", lambda r: r.title),
        ("description", lambda r: r.description),
        ("address", lambda r: r.address),
        ("city", lambda r: r.city),
    )

    def __init__(self, store: IProjectRecordStore) -> None:
        super().__init__(store)

    def _passes_filters(self, record: ProjectRecord, filters: ProjectFilters) -> bool:
        return _allowed(record.status, filters.statuses) and _allowed(
            record.stage, filters.stages
        )

    def _to_result(self, record: ProjectRecord, matched: tuple[str, ...]) -> SearchResult:
        return SearchResult(
            id=record.id,
            entity_type=EntityKind.PROJECT,
            title=record.title,
            description=record.description or None,
            subtitle=_subtitle(record.status, record.stage, record.city),
            metadata=ProjectMetadata(
                status=record.status,
                stage=record.stage,
                budget=record.budget,
                address=record.address,
                city=record.city,
                created_by=record.created_by_name,
            ),
            matched_fields=matched,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )


class ContactSearcher(EntitySearcher[ContactRecord, ContactFilters]):
    """Contacts: name, email, phone, title, department, owning company name."""

    entity_kind = EntityKind.CONTACT
    searchable_fields = (
        ("name", lambda r: r.name),
        ("email", lambda r: r.email),
        ("phone", lambda r: r.phone),
        ("title", lambda r: r.title),
        ("department", lambda r: r.department),
        ("company", lambda r: r.company_name),
    )

    def __init__(self, store: IContactRecordStore) -> None:
        super().__init__(store)

    def _passes_filters(self, record: ContactRecord, filters: ContactFilters) -> bool:
        return _allowed(record.role, filters.roles)

    def _to_result(self, record: ContactRecord, matched: tuple[str, ...]) -> SearchResult:
        return SearchResult(
            id=record.id,
            entity_type=EntityKind.CONTACT,
            title=record.name,
            description=record.email or None,
            subtitle=_subtitle(record.role, record.title, record.company_name),
            metadata=ContactMetadata(
                email=record.email,
                phone=record.phone,
                role=record.role,
                title=record.title,
                department=record.department,
                company_id=record.company_id,
                company_name=record.company_name,
                company_type=record.company_type,
            ),
            matched_fields=matched,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )


class CompanySearcher(EntitySearcher[CompanyRecord, CompanyFilters]):
    """Companies: name, description, website, email, address, city."""

    entity_kind = EntityKind.COMPANY
    searchable_fields = (
        ("name", lambda r: r.name),
        ("description", lambda r: r.description),
        ("website", lambda r: r.website),
        ("email", lambda r: r.email),
        ("address", lambda r: r.address),
        ("city", lambda r: r.city),
    )

    def __init__(self, store: ICompanyRecordStore) -> None:
        super().__init__(store)

    def _passes_filters(self, record: CompanyRecord, filters: CompanyFilters) -> bool:
        return _allowed(record.type, filters.types)

    def _to_result(self, record: CompanyRecord, matched: tuple[str, ...]) -> SearchResult:
        return SearchResult(
            id=record.id,
            entity_type=EntityKind.COMPANY,
            title=record.name,
            description=record.description or None,
            subtitle=_subtitle(record.type, record.city),
            metadata=CompanyMetadata(
                type=record.type,
                website=record.website,
                email=record.email,
                phone=record.phone,
                address=record.address,
                city=record.city,
                state=record.state,
                country=record.country,
            ),
            matched_fields=matched,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )


def _parse_tags(raw: str | None) -> list[str]:
    """Decode the stored JSON tag list; anything else yields no tags."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return []
    if not isinstance(value, list):
        return []
    return [str(tag) for tag in value]


class DocumentSearcher(EntitySearcher[DocumentRecord, DocumentFilters]):
    """Documents: name, description, tags, latest version file name and notes."""

    entity_kind = EntityKind.DOCUMENT
    searchable_fields = (
        ("name", lambda r: r.name),
        ("description", lambda r: r.description),
        ("tags", lambda r: r.tags),
        ("fileName", lambda r: r.latest_file_name),
        ("versionNotes", lambda r: r.latest_version_notes),
    )

    def __init__(self, store: IDocumentRecordStore) -> None:
        super().__init__(store)

    def _passes_filters(self, record: DocumentRecord, filters: DocumentFilters) -> bool:
        return _allowed(record.type, filters.types)

    def _to_result(self, record: DocumentRecord, matched: tuple[str, ...]) -> SearchResult:
        return SearchResult(
            id=record.id,
            entity_type=EntityKind.DOCUMENT,
            title=record.name,
            description=record.description or None,
            subtitle=_subtitle(
                record.type, f"v{record.current_version}", record.project_title
            ),
            metadata=DocumentMetadata(
                type=record.type,
                current_version=record.current_version,
                tags=_parse_tags(record.tags),
                project_id=record.project_id,
                project_title=record.project_title,
                created_by=record.created_by_name,
                file_name=record.latest_file_name,
                file_size=record.latest_file_size,
            ),
            matched_fields=matched,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )
