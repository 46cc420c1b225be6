"""Project ORM model."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import ProjectStage, ProjectStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel


class Project(RecordModel, Base):
    """Project model. Table: project. created_by -> user.id."""

    __tablename__ = "project"

    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    stage: Mapped[str] = mapped_column(
        Enum(*ProjectStage.values(), name="project_stage"),
        nullable=False,
        default=ProjectStage.DESIGN.value,
    )
    status: Mapped[str] = mapped_column(
        Enum(*ProjectStatus.values(), name="project_status"),
        nullable=False,
        default=ProjectStatus.PLANNING.value,
    )
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    state: Mapped[str | None] = mapped_column(String, nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String, nullable=True)
    country: Mapped[str | None] = mapped_column(String, nullable=True)
    created_by: Mapped[str] = mapped_column(
        String, ForeignKey("user.id"), nullable=False
    )
