"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

Record stores are read-only. find_matching may push the text and filter
predicates down to the store; callers still treat the rows as candidates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.search import (
        CompanyFilters,
        CompanyRecord,
        ContactFilters,
        ContactRecord,
        DateRange,
        DocumentFilters,
        DocumentRecord,
        ProjectFilters,
        ProjectRecord,
    )


class IProjectRecordStore(Protocol):
    """Protocol for project record lookup (title, description, address, city)."""

    async def find_matching(
        self, query: str, filters: ProjectFilters, date_range: DateRange
    ) -> list[ProjectRecord]:
        """Return projects whose searchable fields contain query (case-insensitive) and that pass filters."""


class IContactRecordStore(Protocol):
    """Protocol for contact record lookup (joined with owning company)."""

    async def find_matching(
        self, query: str, filters: ContactFilters, date_range: DateRange
    ) -> list[ContactRecord]:
        """Return contacts whose searchable fields contain query (case-insensitive) and that pass filters."""


class ICompanyRecordStore(Protocol):
    """Protocol for company record lookup."""

    async def find_matching(
        self, query: str, filters: CompanyFilters, date_range: DateRange
    ) -> list[CompanyRecord]:
        """Return companies whose searchable fields contain query (case-insensitive) and that pass filters."""


class IDocumentRecordStore(Protocol):
    """Protocol for project document lookup (joined with latest version)."""

    async def find_matching(
        self, query: str, filters: DocumentFilters, date_range: DateRange
    ) -> list[DocumentRecord]:
        """Return documents whose searchable fields contain query (case-insensitive) and that pass filters."""
