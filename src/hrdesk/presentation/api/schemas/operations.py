"""Request/response schemas for the operations endpoint.

Argument fields are optional on purpose: presence rules belong to the
validation layer so that a missing field is reported as BAD_USER_INPUT
with the same wording regardless of transport.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class OperationName(str, Enum):
    """The operations exposed by the API."""

    LOGIN = "login"
    SIGNUP = "signup"
    GET_ALL_EMPLOYEES = "getAllEmployees"
    GET_EMPLOYEE_BY_ID = "getEmployeeById"
    SEARCH_EMPLOYEES = "searchEmployeeByDesignationOrDepartment"
    ADD_EMPLOYEE = "addEmployee"
    UPDATE_EMPLOYEE_BY_ID = "updateEmployeeById"
    DELETE_EMPLOYEE_BY_ID = "deleteEmployeeById"


class OperationRequest(BaseModel):
    """A named operation with its arguments."""

    operation: OperationName
    arguments: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "operation": "addEmployee",
                "arguments": {
                    "first_name": "Ann",
                    "last_name": "Lee",
                    "department": "Engineering",
                },
            },
        },
    )


class OperationResponse(BaseModel):
    """Successful operation result."""

    operation: OperationName
    data: Any


class NoArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")


class LoginArguments(BaseModel):
    username: str | None = None
    password: str | None = None


class SignupArguments(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class EmployeeIdArguments(BaseModel):
    # Older clients call the employee id "eid"
    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "eid"))


class SearchEmployeesArguments(BaseModel):
    designation: str | None = None
    department: str | None = None


class EmployeeFieldsArguments(BaseModel):
    """Named employee fields; any other keys are kept as extra fields."""

    model_config = ConfigDict(extra="allow")

    first_name: str | None = None
    last_name: str | None = None
    designation: str | None = None
    department: str | None = None

    @property
    def extra_fields(self) -> dict[str, Any]:
        extra = dict(self.model_extra or {})
        # Left over when a client sends both id spellings
        extra.pop("eid", None)
        return extra

    def named_fields(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "designation": self.designation,
            "department": self.department,
        }


class AddEmployeeArguments(EmployeeFieldsArguments):
    pass


class UpdateEmployeeArguments(EmployeeFieldsArguments):
    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "eid"))

    def supplied_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, explicit nulls included."""
        named = {
            name: getattr(self, name)
            for name in self.named_fields()
            if name in self.model_fields_set
        }
        return {**self.extra_fields, **named}
