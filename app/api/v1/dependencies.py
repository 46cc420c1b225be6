"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the calling principal and the search use
case. The search service is built from infrastructure implementations
here; routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.user import Principal
from app.application.interfaces.services import IEntitySearcher
from app.application.services.authorization_service import AuthorizationService
from app.application.use_cases.search import (
    CompanySearcher,
    ContactSearcher,
    DocumentSearcher,
    ProjectSearcher,
    SearchService,
)
from app.core.config import get_settings
from app.domain.enums import EntityKind
from app.infrastructure.persistence.repositories import (
    CompanySearchRepository,
    ContactSearchRepository,
    DocumentSearchRepository,
    ProjectSearchRepository,
)
from app.infrastructure.security.jwt import principal_from_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_principal_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Principal | None:
    """Return the caller from the bearer JWT if present; else None.

    Missing or invalid tokens are not rejected here: the search use case
    validates the request first and then raises 401 for a None principal.
    """
    if not credentials:
        return None
    try:
        return principal_from_token(credentials.credentials)
    except (ValueError, KeyError):
        return None


def get_authorization_service() -> AuthorizationService:
    """Role-based read gate (composition root)."""
    return AuthorizationService()


def get_entity_searchers() -> dict[EntityKind, IEntitySearcher]:
    """One searcher per record kind, each over its SQL record store.

    Stores resolve the session factory on first query, so building them never
    touches the database; a missing DATABASE_URL fails the fan-out with 503.
    """
    return {
        EntityKind.PROJECT: ProjectSearcher(ProjectSearchRepository()),
        EntityKind.CONTACT: ContactSearcher(ContactSearchRepository()),
        EntityKind.COMPANY: CompanySearcher(CompanySearchRepository()),
        EntityKind.DOCUMENT: DocumentSearcher(DocumentSearchRepository()),
    }


def get_search_service(
    searchers: Annotated[dict[EntityKind, IEntitySearcher], Depends(get_entity_searchers)],
    authorization: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> SearchService:
    """Federated search use case (composition root)."""
    settings = get_settings()
    return SearchService(
        searchers=searchers,
        authorization=authorization,
        timeout_seconds=settings.search_timeout_seconds,
        allow_partial_results=settings.search_allow_partial_results,
    )
