"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.search import DateRange, SearchResult
    from app.application.dtos.user import Principal


# Authorization gate (owned by the auth/session layer)
class IAuthorizationService(Protocol):
    """Protocol for read-permission checks on the authenticated caller."""

    def can_read(self, principal: Principal) -> bool:
        """Return True if the principal may read records."""


# Entity searcher interface
class IEntitySearcher(Protocol):
    """Protocol for a per-kind searcher (one record store, typed results)."""

    async def search(
        self, query: str, filters: object, date_range: DateRange
    ) -> list[SearchResult]:
        """Return matches for query that pass filters, with matched-field provenance."""
