"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

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
    UserRole,
)
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    RecordsException,
    SearchTimeoutException,
    SqlNotConfiguredException,
    UpstreamSearchException,
    ValidationException,
)

__all__ = [
    # Enums
    "CompanyType",
    "ContactRole",
    "DocumentType",
    "EntityKind",
    "ProjectStage",
    "ProjectStatus",
    "SearchEntityType",
    "SortBy",
    "SortOrder",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "RecordsException",
    "SearchTimeoutException",
    "SqlNotConfiguredException",
    "UpstreamSearchException",
    "ValidationException",
]
