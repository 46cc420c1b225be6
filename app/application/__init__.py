"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (record stores).
"""

from app.application.interfaces import (
    IAuthorizationService,
    ICompanyRecordStore,
    IContactRecordStore,
    IDocumentRecordStore,
    IEntitySearcher,
    IProjectRecordStore,
)
from app.application.services.authorization_service import AuthorizationService
from app.application.use_cases.search import SearchService

__all__ = [
    "AuthorizationService",
    "IAuthorizationService",
    "ICompanyRecordStore",
    "IContactRecordStore",
    "IDocumentRecordStore",
    "IEntitySearcher",
    "IProjectRecordStore",
    "SearchService",
]
