"""Federated search use cases: entity searchers and the global search coordinator."""

from app.application.use_cases.search.global_search import (
    KIND_ORDER,
    SearchService,
    resolve_target_kinds,
    validate_request,
)
from app.application.use_cases.search.searchers import (
    CompanySearcher,
    ContactSearcher,
    DocumentSearcher,
    EntitySearcher,
    ProjectSearcher,
)

__all__ = [
    "KIND_ORDER",
    "CompanySearcher",
    "ContactSearcher",
    "DocumentSearcher",
    "EntitySearcher",
    "ProjectSearcher",
    "SearchService",
    "resolve_target_kinds",
    "validate_request",
]
