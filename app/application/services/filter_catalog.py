"""Filter catalog: legal values for each structured search filter."""

from app.application.dtos.search import FilterCatalog
from app.domain.enums import (
    CompanyType,
    ContactRole,
    DocumentType,
    ProjectStage,
    ProjectStatus,
)


def get_available_filters() -> FilterCatalog:
    """Return filter values in enum declaration order."""
    return FilterCatalog(
        project_statuses=ProjectStatus.values(),
        project_stages=ProjectStage.values(),
        company_types=CompanyType.values(),
        contact_roles=ContactRole.values(),
        document_types=DocumentType.values(),
    )
