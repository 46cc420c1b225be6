"""Search API schemas.

Wire format is camelCase (alias_generator); snake_case names are accepted
on input too. Schemas convert to and from the application DTOs so routes
stay thin.
"""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.application.dtos.search import (
    DEFAULT_LIMIT,
    FilterCatalog,
    SearchFilters,
    SearchOptions,
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from app.application.services.relevance import relevance_score
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
from app.shared.utils.datetime import ensure_utc, start_of_day_utc


class CamelModel(BaseModel):
    """Base for search schemas: camelCase aliases, populate by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchFiltersSchema(CamelModel):
    """Optional filters. A missing or empty list means no restriction."""

    entity_types: list[SearchEntityType] | None = None
    date_from: datetime | None = Field(
        default=None, description="ISO date (midnight UTC) or datetime; inclusive"
    )
    date_to: datetime | None = Field(
        default=None, description="ISO date (midnight UTC) or datetime; inclusive"
    )
    project_status: list[ProjectStatus] | None = None
    project_stage: list[ProjectStage] | None = None
    company_types: list[CompanyType] | None = None
    contact_roles: list[ContactRole] | None = None
    document_types: list[DocumentType] | None = None

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _date_only_is_midnight_utc(cls, v: Any) -> Any:
        """Accept a bare ISO date as midnight UTC of that day."""
        if isinstance(v, str) and len(v) == 10:
            try:
                return start_of_day_utc(date.fromisoformat(v))
            except ValueError:
                return v
        if isinstance(v, date) and not isinstance(v, datetime):
            return start_of_day_utc(v)
        return v

    @field_validator("date_from", "date_to")
    @classmethod
    def _naive_is_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    def to_dto(self) -> SearchFilters:
        return SearchFilters(
            entity_types=self.entity_types,
            date_from=self.date_from,
            date_to=self.date_to,
            project_status=self.project_status,
            project_stage=self.project_stage,
            company_types=self.company_types,
            contact_roles=self.contact_roles,
            document_types=self.document_types,
        )

    @classmethod
    def from_dto(cls, filters: SearchFilters) -> "SearchFiltersSchema":
        return cls(**asdict(filters))


class SearchOptionsSchema(CamelModel):
    """Sort and paging. Range checks happen in the search service (400 on violation)."""

    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def to_dto(self) -> SearchOptions:
        return SearchOptions(
            sort_by=self.sort_by,
            sort_order=self.sort_order,
            limit=self.limit,
            offset=self.offset,
        )


class SearchRequestBody(CamelModel):
    """Request body for POST /search."""

    query: str = Field(..., description="Free text; trimmed, 1-500 characters")
    filters: SearchFiltersSchema | None = None
    options: SearchOptionsSchema | None = None

    def to_dto(self) -> SearchRequest:
        return SearchRequest(
            query=self.query,
            filters=self.filters.to_dto() if self.filters else None,
            options=self.options.to_dto() if self.options else None,
        )


class LoadMoreBody(CamelModel):
    """Request body for POST /search/more: the previous request and the next offset."""

    request: SearchRequestBody
    offset: int


def _camel_keys(data: dict[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in data.items()}


class SearchResultResponse(CamelModel):
    """Single search hit. metadata keys depend on entityType."""

    id: str
    entity_type: EntityKind
    title: str
    description: str | None = None
    subtitle: str | None = None
    metadata: dict[str, Any]
    matched_fields: list[str]
    relevance_score: int
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            id=result.id,
            entity_type=result.entity_type,
            title=result.title,
            description=result.description,
            subtitle=result.subtitle,
            metadata=_camel_keys(asdict(result.metadata)),
            matched_fields=list(result.matched_fields),
            relevance_score=relevance_score(result),
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class SearchResponseSchema(CamelModel):
    """One page of results plus the pre-pagination total.

    appliedFilters is always present; a request without filters echoes {}.
    Dates are echoed in their normalized form (UTC ISO datetime).
    """

    results: list[SearchResultResponse]
    total_count: int
    has_more: bool
    query: str
    applied_filters: SearchFiltersSchema
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, response: SearchResponse) -> "SearchResponseSchema":
        return cls(
            results=[SearchResultResponse.from_dto(r) for r in response.results],
            total_count=response.total_count,
            has_more=response.has_more,
            query=response.query,
            applied_filters=(
                SearchFiltersSchema.from_dto(response.applied_filters)
                if response.applied_filters is not None
                else SearchFiltersSchema()
            ),
            warnings=list(response.warnings),
        )


class FilterCatalogResponse(CamelModel):
    """Legal values for each structured filter, in declaration order."""

    project_statuses: list[str]
    project_stages: list[str]
    company_types: list[str]
    contact_roles: list[str]
    document_types: list[str]

    @classmethod
    def from_dto(cls, catalog: FilterCatalog) -> "FilterCatalogResponse":
        return cls(**asdict(catalog))
