"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse
from app.schemas.search import (
    FilterCatalogResponse,
    LoadMoreBody,
    SearchFiltersSchema,
    SearchOptionsSchema,
    SearchRequestBody,
    SearchResponseSchema,
    SearchResultResponse,
)

__all__ = [
    "FilterCatalogResponse",
    "HealthResponse",
    "LoadMoreBody",
    "SearchFiltersSchema",
    "SearchOptionsSchema",
    "SearchRequestBody",
    "SearchResponseSchema",
    "SearchResultResponse",
]
