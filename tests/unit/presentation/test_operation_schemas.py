"""Unit tests for the operation argument schemas and dispatch table."""

import pytest

from hrdesk.domain.shared.exceptions import InvalidInputError
from hrdesk.presentation.api.exception_handlers import format_validation_errors
from hrdesk.presentation.api.routers.operations import OPERATIONS, _parse_arguments
from hrdesk.presentation.api.schemas import (
    AddEmployeeArguments,
    EmployeeIdArguments,
    LoginArguments,
    OperationName,
    UpdateEmployeeArguments,
)


class TestDispatchTable:
    def test_every_operation_has_a_handler(self):
        assert set(OPERATIONS) == set(OperationName)

    def test_operation_names(self):
        assert {op.value for op in OperationName} == {
            "login",
            "signup",
            "getAllEmployees",
            "getEmployeeById",
            "searchEmployeeByDesignationOrDepartment",
            "addEmployee",
            "updateEmployeeById",
            "deleteEmployeeById",
        }


class TestArgumentSchemas:
    def test_eid_is_an_alias_for_id(self):
        assert EmployeeIdArguments.model_validate({"eid": "abc"}).id == "abc"
        assert EmployeeIdArguments.model_validate({"id": "abc"}).id == "abc"

    def test_add_arguments_split_named_and_extra_fields(self):
        args = AddEmployeeArguments.model_validate(
            {"first_name": "Ann", "last_name": "Lee", "email": "a@b.c"},
        )

        assert args.named_fields() == {
            "first_name": "Ann",
            "last_name": "Lee",
            "designation": None,
            "department": None,
        }
        assert args.extra_fields == {"email": "a@b.c"}

    def test_update_arguments_do_not_leak_id_into_extras(self):
        args = UpdateEmployeeArguments.model_validate(
            {"eid": "abc", "phone": "555"},
        )

        assert args.id == "abc"
        assert args.extra_fields == {"phone": "555"}

    def test_update_supplied_fields_keep_explicit_nulls(self):
        args = UpdateEmployeeArguments.model_validate(
            {"id": "abc", "designation": None, "department": "Ops", "phone": None},
        )

        assert args.supplied_fields() == {
            "designation": None,
            "department": "Ops",
            "phone": None,
        }

    def test_update_supplied_fields_skip_omitted_names(self):
        args = UpdateEmployeeArguments.model_validate({"eid": "abc", "last_name": "Kim"})

        assert args.supplied_fields() == {"last_name": "Kim"}

    def test_wrong_type_is_invalid_input(self):
        with pytest.raises(InvalidInputError, match="arguments.username"):
            _parse_arguments(LoginArguments, {"username": 42})


class TestFormatValidationErrors:
    def test_body_prefix_is_dropped(self):
        message = format_validation_errors(
            [{"loc": ("body", "operation"), "msg": "Input should be 'login'"}],
        )

        assert message == "Invalid request: operation: Input should be 'login'"

    def test_error_without_location(self):
        assert format_validation_errors([{"loc": (), "msg": "bad"}]) == (
            "Invalid request: bad"
        )
