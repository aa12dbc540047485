"""SQLAlchemy model for Employee aggregate."""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from hrdesk.domain.employee import FIELD_MAX_LENGTH
from hrdesk.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class EmployeeModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Employee aggregates.

    Fields outside the named columns are stored in the ``attributes`` JSON
    column exactly as received.
    """

    __tablename__ = "employees"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(FIELD_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(FIELD_MAX_LENGTH), nullable=False)
    designation: Mapped[str | None] = mapped_column(
        String(FIELD_MAX_LENGTH),
        nullable=True,
        index=True,
    )
    department: Mapped[str | None] = mapped_column(
        String(FIELD_MAX_LENGTH),
        nullable=True,
        index=True,
    )
    attributes: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        default=dict,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<EmployeeModel(id={self.id}, "
            f"name={self.first_name} {self.last_name})>"
        )
