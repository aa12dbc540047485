"""Unit tests for EmployeeService."""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError

from hrdesk.application.dtos import DeleteResultDTO, EmployeeDTO
from hrdesk.application.services import EmployeeService
from hrdesk.domain.employee import FIELD_MAX_LENGTH, Employee, EmployeeNotFoundError
from hrdesk.domain.shared.exceptions import (
    ErrorCode,
    InternalError,
    InvalidInputError,
)

EMPLOYEE_ID = UUID("00000000-0000-0000-0000-00000000e001")


def _employee(**overrides) -> Employee:
    fields = {
        "first_name": "Ann",
        "last_name": "Lee",
        "designation": "Engineer",
        "department": "R&D",
        "attributes": {"email": "ann@example.com"},
    }
    fields.update(overrides)
    employee = Employee.create(**fields)
    return Employee.reconstitute(
        id=EMPLOYEE_ID,
        first_name=employee.first_name,
        last_name=employee.last_name,
        designation=employee.designation,
        department=employee.department,
        attributes=employee.attributes,
        created_at=employee.created_at,
        updated_at=employee.updated_at,
    )


class TestEmployeeQueries:
    """Tests for the read operations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.service = EmployeeService(employee_repository=self.repo)

    @pytest.mark.asyncio
    async def test_get_all_returns_every_employee(self):
        self.repo.find_many.return_value = [_employee(), _employee(first_name="Bo")]

        result = await self.service.get_all()

        assert [e.first_name for e in result] == ["Ann", "Bo"]
        self.repo.find_many.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_get_all_empty_store(self):
        self.repo.find_many.return_value = []

        assert await self.service.get_all() == []

    @pytest.mark.asyncio
    async def test_get_by_id_returns_employee(self):
        self.repo.find_by_id.return_value = _employee()

        result = await self.service.get_by_id(str(EMPLOYEE_ID))

        assert isinstance(result, EmployeeDTO)
        assert result.id == str(EMPLOYEE_ID)
        self.repo.find_by_id.assert_called_once_with(EMPLOYEE_ID)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self):
        self.repo.find_by_id.return_value = None

        with pytest.raises(EmployeeNotFoundError) as exc_info:
            await self.service.get_by_id(str(EMPLOYEE_ID))

        assert exc_info.value.code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_by_id_malformed_id_makes_no_store_call(self):
        with pytest.raises(InvalidInputError):
            await self.service.get_by_id("42")

        self.repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_requires_a_filter(self):
        with pytest.raises(InvalidInputError):
            await self.service.search(designation=None, department="  ")

        self.repo.find_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_passes_only_given_filters(self):
        self.repo.find_many.return_value = []

        await self.service.search(department="R&D")

        self.repo.find_many.assert_called_once_with(department="R&D")

    @pytest.mark.asyncio
    async def test_search_combines_both_filters(self):
        self.repo.find_many.return_value = [_employee()]

        result = await self.service.search(designation="Engineer", department="R&D")

        assert len(result) == 1
        self.repo.find_many.assert_called_once_with(
            designation="Engineer",
            department="R&D",
        )

    @pytest.mark.asyncio
    async def test_store_failure_is_internal(self):
        self.repo.find_many.side_effect = OperationalError("SELECT", {}, Exception())

        with pytest.raises(InternalError) as exc_info:
            await self.service.get_all()

        assert exc_info.value.message == "An internal error occurred"
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestAddEmployee:
    """Tests for addEmployee."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.repo.insert.side_effect = lambda employee: employee
        self.service = EmployeeService(employee_repository=self.repo)

    @pytest.mark.asyncio
    async def test_add_keeps_extra_fields(self):
        result = await self.service.add(
            first_name="Ann",
            last_name="Lee",
            department="R&D",
            extra={"email": "ann@example.com", "age": 31},
        )

        data = result.to_dict()
        assert data["email"] == "ann@example.com"
        assert data["age"] == 31
        assert data["designation"] is None
        inserted = self.repo.insert.call_args.args[0]
        assert inserted.attributes == {"email": "ann@example.com", "age": 31}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("first_name,last_name", [(None, "Lee"), ("Ann", " ")])
    async def test_add_requires_names(self, first_name, last_name):
        with pytest.raises(InvalidInputError, match="Missing required field"):
            await self.service.add(first_name=first_name, last_name=last_name)

        self.repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_rejects_reserved_extra_field(self):
        with pytest.raises(InvalidInputError, match="Reserved"):
            await self.service.add("Ann", "Lee", extra={"id": "x"})

        self.repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_keeps_null_extra_fields(self):
        result = await self.service.add("Ann", "Lee", extra={"manager": None})

        data = result.to_dict()
        assert "manager" in data
        assert data["manager"] is None

    @pytest.mark.asyncio
    async def test_add_rejects_name_longer_than_column(self):
        with pytest.raises(InvalidInputError) as exc_info:
            await self.service.add("A" * (FIELD_MAX_LENGTH + 1), "Lee")

        assert exc_info.value.details == {
            "fields": ["first_name"],
            "limit": FIELD_MAX_LENGTH,
        }
        self.repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_accepts_name_at_column_width(self):
        result = await self.service.add("A" * FIELD_MAX_LENGTH, "Lee")

        assert len(result.first_name) == FIELD_MAX_LENGTH


class TestUpdateEmployee:
    """Tests for updateEmployeeById."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.service = EmployeeService(employee_repository=self.repo)

    @pytest.mark.asyncio
    async def test_update_sends_merge_patch(self):
        self.repo.update_by_id.return_value = _employee(designation="Lead")

        result = await self.service.update_by_id(
            str(EMPLOYEE_ID),
            {"designation": "Lead", "phone": "555"},
        )

        assert result.designation == "Lead"
        self.repo.update_by_id.assert_called_once_with(
            EMPLOYEE_ID,
            {"designation": "Lead", "attributes": {"phone": "555"}},
        )

    @pytest.mark.asyncio
    async def test_update_without_changes_returns_current_record(self):
        self.repo.find_by_id.return_value = _employee()

        result = await self.service.update_by_id(str(EMPLOYEE_ID), {})

        assert result.first_name == "Ann"
        self.repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_not_found(self):
        self.repo.update_by_id.return_value = None

        with pytest.raises(EmployeeNotFoundError):
            await self.service.update_by_id(str(EMPLOYEE_ID), {"department": "Ops"})

    @pytest.mark.asyncio
    async def test_update_rejects_blank_name(self):
        with pytest.raises(InvalidInputError, match="first_name cannot be blank"):
            await self.service.update_by_id(str(EMPLOYEE_ID), {"first_name": " "})

        self.repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_with_explicit_null_clears_field(self):
        self.repo.update_by_id.return_value = _employee(designation=None)

        result = await self.service.update_by_id(
            str(EMPLOYEE_ID),
            {"designation": None, "phone": None},
        )

        assert result.designation is None
        self.repo.update_by_id.assert_called_once_with(
            EMPLOYEE_ID,
            {"designation": None, "attributes": {"phone": None}},
        )

    @pytest.mark.asyncio
    async def test_update_omitted_fields_are_not_patched(self):
        self.repo.update_by_id.return_value = _employee()

        await self.service.update_by_id(str(EMPLOYEE_ID), {"department": "Ops"})

        self.repo.update_by_id.assert_called_once_with(
            EMPLOYEE_ID,
            {"department": "Ops"},
        )

    @pytest.mark.asyncio
    async def test_update_rejects_null_name(self):
        with pytest.raises(InvalidInputError, match="last_name cannot be blank"):
            await self.service.update_by_id(str(EMPLOYEE_ID), {"last_name": None})

        self.repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_rejects_value_longer_than_column(self):
        with pytest.raises(InvalidInputError, match="longer than 255 characters: department"):
            await self.service.update_by_id(
                str(EMPLOYEE_ID),
                {"department": "D" * (FIELD_MAX_LENGTH + 1)},
            )

        self.repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_requires_id(self):
        with pytest.raises(InvalidInputError):
            await self.service.update_by_id(None, {"department": "Ops"})

        self.repo.update_by_id.assert_not_called()


class TestDeleteEmployee:
    """Tests for deleteEmployeeById."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = AsyncMock()
        self.service = EmployeeService(employee_repository=self.repo)

    @pytest.mark.asyncio
    async def test_delete_returns_confirmation(self):
        self.repo.delete_by_id.return_value = _employee()

        result = await self.service.delete_by_id(str(EMPLOYEE_ID))

        assert result == DeleteResultDTO(
            success=True,
            message="Employee deleted successfully.",
            id=str(EMPLOYEE_ID),
        )

    @pytest.mark.asyncio
    async def test_delete_not_found(self):
        self.repo.delete_by_id.return_value = None

        with pytest.raises(EmployeeNotFoundError):
            await self.service.delete_by_id(str(EMPLOYEE_ID))
