"""DTOs for employee operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from hrdesk.domain.employee import Employee


@dataclass(frozen=True)
class EmployeeDTO:
    """Employee record for the presentation layer.

    ``to_dict`` flattens the extra attributes next to the named fields so
    clients get back exactly the fields they sent.
    """

    id: str
    first_name: str
    last_name: str
    designation: str | None
    department: str | None
    created_at: datetime
    updated_at: datetime
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_employee(cls, employee: Employee) -> EmployeeDTO:
        return cls(
            id=str(employee.id),
            first_name=employee.first_name,
            last_name=employee.last_name,
            designation=employee.designation,
            department=employee.department,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
            attributes=employee.attributes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.attributes,
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "designation": self.designation,
            "department": self.department,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class DeleteResultDTO:
    """Outcome of deleteEmployeeById."""

    success: bool
    message: str
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message, "id": self.id}
