"""Employee domain: the directory's single CRUD record type."""

from hrdesk.domain.employee.aggregates import (
    CORE_FIELDS,
    FIELD_MAX_LENGTH,
    RESERVED_FIELDS,
    Employee,
)
from hrdesk.domain.employee.exceptions import EmployeeNotFoundError
from hrdesk.domain.employee.repositories import EmployeeRepository

__all__ = [
    "CORE_FIELDS",
    "FIELD_MAX_LENGTH",
    "RESERVED_FIELDS",
    "Employee",
    "EmployeeNotFoundError",
    "EmployeeRepository",
]
