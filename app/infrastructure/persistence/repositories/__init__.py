"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.search_repo import (
    CompanySearchRepository,
    ContactSearchRepository,
    DocumentSearchRepository,
    ProjectSearchRepository,
)

__all__ = [
    "CompanySearchRepository",
    "ContactSearchRepository",
    "DocumentSearchRepository",
    "ProjectSearchRepository",
]
