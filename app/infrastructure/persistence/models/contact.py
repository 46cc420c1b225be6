"""Contact ORM model. Every contact belongs to one company."""

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import ContactRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel


class Contact(RecordModel, Base):
    """Contact model. Table: contact. FK company_id -> company.id."""

    __tablename__ = "contact"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    role: Mapped[str] = mapped_column(
        Enum(*ContactRole.values(), name="contact_role"), nullable=False
    )
    title: Mapped[str | None] = mapped_column(String, nullable=True)
    department: Mapped[str | None] = mapped_column(String, nullable=True)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)
    company_id: Mapped[str] = mapped_column(
        String, ForeignKey("company.id", ondelete="CASCADE"), nullable=False
    )
