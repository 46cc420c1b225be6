"""SQLAlchemy mixins shared by the record tables.

The records application stores text ids and naive UTC timestamps
(timestamp without time zone).
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class TextIdMixin:
    """Mixin for models keyed by an application-generated text id."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (naive, UTC by convention)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=False), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=False),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class RecordModel(TextIdMixin, TimestampMixin):
    """Combined mixin: text id + created_at/updated_at."""

    __abstract__ = True
