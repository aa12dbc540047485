"""Employee domain exceptions."""

from uuid import UUID

from hrdesk.domain.shared.exceptions import EntityNotFoundError


class EmployeeNotFoundError(EntityNotFoundError):
    """No employee exists with the requested id."""

    def __init__(self, employee_id: UUID) -> None:
        self.employee_id = employee_id
        super().__init__(
            f"Employee not found: {employee_id}",
            details={"employee_id": str(employee_id)},
        )
