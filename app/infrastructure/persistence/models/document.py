"""Project document and document version ORM models.

tags is a JSON-encoded array stored as text; file_size is a byte count
stored as text. The latest version of a document is the one created last.
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import DocumentType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel, TextIdMixin


class ProjectDocument(RecordModel, Base):
    """Document model. Table: project_document. FK project_id, created_by."""

    __tablename__ = "project_document"

    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    type: Mapped[str] = mapped_column(
        Enum(*DocumentType.values(), name="document_type"), nullable=False
    )
    current_version: Mapped[str] = mapped_column(
        String, nullable=False, default="1"
    )
    tags: Mapped[str | None] = mapped_column(String, nullable=True)
    created_by: Mapped[str] = mapped_column(
        String, ForeignKey("user.id"), nullable=False
    )


class ProjectDocumentVersion(TextIdMixin, Base):
    """Uploaded file version. Table: project_document_version. Append-only."""

    __tablename__ = "project_document_version"

    document_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("project_document.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version: Mapped[str] = mapped_column(String, nullable=False)
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    file_size: Mapped[str] = mapped_column(String, nullable=False)
    mime_type: Mapped[str] = mapped_column(String, nullable=False)
    storage_key: Mapped[str] = mapped_column(String, nullable=False)
    version_notes: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=func.now(), nullable=False
    )
    uploaded_by: Mapped[str] = mapped_column(
        String, ForeignKey("user.id"), nullable=False
    )
