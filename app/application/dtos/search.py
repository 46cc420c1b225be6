"""DTOs for federated search (no dependency on ORM or API schemas).

Raw *Record types are what record stores return; SearchResult is the
normalized, merged read-model. Result metadata is a tagged union: one
frozen dataclass per entity kind, checked against entity_type.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from app.domain.enums import (
    CompanyType,
    ContactRole,
    DocumentType,
    EntityKind,
    ProjectStage,
    ProjectStatus,
    SearchEntityType,
    SortBy,
    SortOrder,
)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MAX_QUERY_LENGTH = 500


# ---- Store records (input to entity searchers) ----


@dataclass(frozen=True)
class ProjectRecord:
    """Project row joined with its creator's name."""

    id: str
    title: str
    status: str
    stage: str
    created_at: datetime
    description: str | None = None
    address: str | None = None
    city: str | None = None
    budget: Decimal | None = None
    updated_at: datetime | None = None
    created_by_name: str | None = None


@dataclass(frozen=True)
class ContactRecord:
    """Contact row joined with its owning company."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    phone: str | None = None
    title: str | None = None
    department: str | None = None
    company_id: str | None = None
    company_name: str | None = None
    company_type: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CompanyRecord:
    """Company row."""

    id: str
    name: str
    type: str
    created_at: datetime
    description: str | None = None
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DocumentRecord:
    """Project document row joined with creator, project, and latest version."""

    id: str
    name: str
    type: str
    current_version: str
    created_at: datetime
    description: str | None = None
    tags: str | None = None  # serialized JSON list
    project_id: str | None = None
    project_title: str | None = None
    created_by_name: str | None = None
    latest_file_name: str | None = None
    latest_file_size: str | None = None
    latest_version_notes: str | None = None
    updated_at: datetime | None = None


# ---- Per-kind structured filters ----


@dataclass(frozen=True)
class DateRange:
    """Inclusive created_at bounds; None means unbounded on that side."""

    date_from: datetime | None = None
    date_to: datetime | None = None

    def contains(self, value: datetime) -> bool:
        if self.date_from is not None and value < self.date_from:
            return False
        if self.date_to is not None and value > self.date_to:
            return False
        return True


@dataclass(frozen=True)
class ProjectFilters:
    statuses: tuple[str, ...] = ()
    stages: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContactFilters:
    roles: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompanyFilters:
    types: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentFilters:
    types: tuple[str, ...] = ()


# ---- Request ----


@dataclass(frozen=True)
class SearchFilters:
    """Caller-supplied filters. None (or an empty list) means no restriction."""

    entity_types: list[SearchEntityType] | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    project_status: list[ProjectStatus] | None = None
    project_stage: list[ProjectStage] | None = None
    company_types: list[CompanyType] | None = None
    contact_roles: list[ContactRole] | None = None
    document_types: list[DocumentType] | None = None


@dataclass(frozen=True)
class SearchOptions:
    """Sort and paging options."""

    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC
    limit: int = DEFAULT_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class SearchRequest:
    """Search input: raw query plus optional filters and options."""

    query: str
    filters: SearchFilters | None = None
    options: SearchOptions | None = None


# ---- Result metadata (tagged union) ----


@dataclass(frozen=True)
class ProjectMetadata:
    status: str
    stage: str
    budget: Decimal | None = None
    address: str | None = None
    city: str | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class ContactMetadata:
    email: str
    role: str
    phone: str | None = None
    title: str | None = None
    department: str | None = None
    company_id: str | None = None
    company_name: str | None = None
    company_type: str | None = None


@dataclass(frozen=True)
class CompanyMetadata:
    type: str
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class DocumentMetadata:
    type: str
    current_version: str
    tags: list[str] = field(default_factory=list)
    project_id: str | None = None
    project_title: str | None = None
    created_by: str | None = None
    file_name: str | None = None
    file_size: str | None = None


ResultMetadata = ProjectMetadata | ContactMetadata | CompanyMetadata | DocumentMetadata

_METADATA_BY_KIND: dict[EntityKind, type] = {
    EntityKind.PROJECT: ProjectMetadata,
    EntityKind.CONTACT: ContactMetadata,
    EntityKind.COMPANY: CompanyMetadata,
    EntityKind.DOCUMENT: DocumentMetadata,
}


@dataclass(frozen=True)
class SearchResult:
    """Single normalized hit. matched_fields is ordered and never empty."""

    id: str
    entity_type: EntityKind
    title: str
    metadata: ResultMetadata
    matched_fields: tuple[str, ...]
    created_at: datetime
    description: str | None = None
    subtitle: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.matched_fields:
            raise ValueError(f"Search result {self.id} has no matched fields")
        expected = _METADATA_BY_KIND[self.entity_type]
        if not isinstance(self.metadata, expected):
            raise TypeError(
                f"{self.entity_type.value} result requires {expected.__name__}, "
                f"got {type(self.metadata).__name__}"
            )


# ---- Response ----


@dataclass(frozen=True)
class Page:
    """One slice of a sorted result list."""

    items: list[SearchResult]
    total_count: int
    has_more: bool


@dataclass(frozen=True)
class SearchResponse:
    """Search output. applied_filters echoes the caller's filters verbatim."""

    results: list[SearchResult]
    total_count: int
    has_more: bool
    query: str
    applied_filters: SearchFilters | None
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FilterCatalog:
    """Legal values for each structured filter."""

    project_statuses: list[str]
    project_stages: list[str]
    company_types: list[str]
    contact_roles: list[str]
    document_types: list[str]
