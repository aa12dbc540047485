"""Employee CRUD handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hrdesk.application.dtos import DeleteResultDTO, EmployeeDTO
from hrdesk.application.services.error_boundary import handle_errors
from hrdesk.application.validation import (
    extra_attributes,
    is_blank,
    parse_id,
    require_any,
    require_fields,
    require_max_length,
)
from hrdesk.domain.employee import FIELD_MAX_LENGTH, Employee, EmployeeNotFoundError
from hrdesk.domain.shared.exceptions import InvalidInputError

if TYPE_CHECKING:
    from hrdesk.domain.employee import EmployeeRepository

logger = logging.getLogger(__name__)

DELETE_SUCCESS_MESSAGE = "Employee deleted successfully."


class EmployeeService:
    """Validate, call the store, shape the result. One store call each."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._employee_repo = employee_repository

    @handle_errors("getAllEmployees")
    async def get_all(self) -> list[EmployeeDTO]:
        employees = await self._employee_repo.find_many()
        return [EmployeeDTO.from_employee(e) for e in employees]

    @handle_errors("getEmployeeById")
    async def get_by_id(self, employee_id: Any) -> EmployeeDTO:
        record_id = parse_id(employee_id)

        employee = await self._employee_repo.find_by_id(record_id)
        if employee is None:
            raise EmployeeNotFoundError(record_id)
        return EmployeeDTO.from_employee(employee)

    @handle_errors("searchEmployeeByDesignationOrDepartment")
    async def search(
        self,
        designation: str | None = None,
        department: str | None = None,
    ) -> list[EmployeeDTO]:
        require_any(designation=designation, department=department)

        filters = {
            name: value
            for name, value in (("designation", designation), ("department", department))
            if not is_blank(value)
        }
        employees = await self._employee_repo.find_many(**filters)
        return [EmployeeDTO.from_employee(e) for e in employees]

    @handle_errors("addEmployee")
    async def add(
        self,
        first_name: str | None,
        last_name: str | None,
        designation: str | None = None,
        department: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> EmployeeDTO:
        require_fields(first_name=first_name, last_name=last_name)
        require_max_length(
            FIELD_MAX_LENGTH,
            first_name=first_name,
            last_name=last_name,
            designation=designation,
            department=department,
        )
        attributes = extra_attributes(extra or {})

        employee = Employee.create(
            first_name=first_name,
            last_name=last_name,
            designation=designation,
            department=department,
            attributes=attributes,
        )
        created = await self._employee_repo.insert(employee)
        return EmployeeDTO.from_employee(created)

    @handle_errors("updateEmployeeById")
    async def update_by_id(
        self,
        employee_id: Any,
        fields: dict[str, Any],
    ) -> EmployeeDTO:
        record_id = parse_id(employee_id)
        patch = self._build_patch(fields)

        if patch:
            employee = await self._employee_repo.update_by_id(record_id, patch)
        else:
            employee = await self._employee_repo.find_by_id(record_id)

        if employee is None:
            raise EmployeeNotFoundError(record_id)
        return EmployeeDTO.from_employee(employee)

    @handle_errors("deleteEmployeeById")
    async def delete_by_id(self, employee_id: Any) -> DeleteResultDTO:
        record_id = parse_id(employee_id)

        deleted = await self._employee_repo.delete_by_id(record_id)
        if deleted is None:
            raise EmployeeNotFoundError(record_id)
        return DeleteResultDTO(
            success=True,
            message=DELETE_SUCCESS_MESSAGE,
            id=str(record_id),
        )

    def _build_patch(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Turn update arguments into a merge patch.

        Only the keys present in ``fields`` are written. An explicit None
        clears designation, department or an extra field; the required
        names cannot be cleared.
        """
        fields = dict(fields)
        patch: dict[str, Any] = {}

        for name in ("first_name", "last_name"):
            if name not in fields:
                continue
            value = fields.pop(name)
            if is_blank(value):
                msg = f"{name} cannot be blank"
                raise InvalidInputError(msg, details={"field": name})
            patch[name] = value

        for name in ("designation", "department"):
            if name in fields:
                patch[name] = fields.pop(name)

        require_max_length(FIELD_MAX_LENGTH, **patch)

        attributes = extra_attributes(fields)
        if attributes:
            patch["attributes"] = attributes
        return patch
