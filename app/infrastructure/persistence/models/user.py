"""User ORM model (read for creator display names only)."""

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UserRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel


class User(RecordModel, Base):
    """User model. Table: user."""

    __tablename__ = "user"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    role: Mapped[str] = mapped_column(
        Enum(*UserRole.values(), name="user_role"),
        nullable=False,
        default=UserRole.READONLY.value,
    )
