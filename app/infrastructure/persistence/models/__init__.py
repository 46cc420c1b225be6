"""Persistence models: read-only ORM entities for the searchable records."""

from app.infrastructure.persistence.models.company import Company
from app.infrastructure.persistence.models.contact import Contact
from app.infrastructure.persistence.models.document import (
    ProjectDocument,
    ProjectDocumentVersion,
)
from app.infrastructure.persistence.models.mixins import (
    RecordModel,
    TextIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Company",
    "Contact",
    "Project",
    "ProjectDocument",
    "ProjectDocumentVersion",
    "RecordModel",
    "TextIdMixin",
    "TimestampMixin",
    "User",
]
