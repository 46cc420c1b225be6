"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICompanyRecordStore,
    IContactRecordStore,
    IDocumentRecordStore,
    IProjectRecordStore,
)
from app.application.interfaces.services import (
    IAuthorizationService,
    IEntitySearcher,
)

__all__ = [
    "IAuthorizationService",
    "ICompanyRecordStore",
    "IContactRecordStore",
    "IDocumentRecordStore",
    "IEntitySearcher",
    "IProjectRecordStore",
]
