from hrdesk.domain.employee.repositories.employee_repository import (
    EmployeeRepository,
)

__all__ = ["EmployeeRepository"]
