"""Employee aggregate."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from hrdesk.domain.shared.time import utc_now

# Named columns of an employee record; everything else lives in attributes
CORE_FIELDS = ("first_name", "last_name", "designation", "department")
RESERVED_FIELDS = frozenset({"id", *CORE_FIELDS, "created_at", "updated_at"})
# Column width of every named text field
FIELD_MAX_LENGTH = 255


class Employee:
    """
    Employee aggregate root.

    Only first_name and last_name are required. Any additional fields are
    kept verbatim in ``attributes`` (an open schema).
    """

    def __init__(  # noqa: PLR0913
        self,
        first_name: str,
        last_name: str,
        designation: str | None = None,
        department: str | None = None,
        attributes: dict[str, Any] | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._first_name = first_name
        self._last_name = last_name
        self._designation = designation
        self._department = department
        self._attributes = dict(attributes or {})
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def designation(self) -> str | None:
        return self._designation

    @property
    def department(self) -> str | None:
        return self._department

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        designation: str | None = None,
        department: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> "Employee":
        return cls(
            first_name=first_name,
            last_name=last_name,
            designation=designation,
            department=department,
            attributes=attributes,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        first_name: str,
        last_name: str,
        designation: str | None,
        department: str | None,
        attributes: dict[str, Any] | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Employee":
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            designation=designation,
            department=department,
            attributes=attributes,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id}, "
            f"name={self._first_name} {self._last_name})"
        )
