"""Application DTOs (no ORM dependency)."""

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
    FilterCatalog,
    Page,
    ProjectFilters,
    ProjectMetadata,
    ProjectRecord,
    SearchFilters,
    SearchOptions,
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from app.application.dtos.user import Principal

__all__ = [
    "CompanyFilters",
    "CompanyMetadata",
    "CompanyRecord",
    "ContactFilters",
    "ContactMetadata",
    "ContactRecord",
    "DateRange",
    "DocumentFilters",
    "DocumentMetadata",
    "DocumentRecord",
    "FilterCatalog",
    "Page",
    "Principal",
    "ProjectFilters",
    "ProjectMetadata",
    "ProjectRecord",
    "SearchFilters",
    "SearchOptions",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
]
