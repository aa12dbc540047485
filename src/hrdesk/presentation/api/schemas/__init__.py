"""API request/response schemas."""

from hrdesk.presentation.api.schemas.common import ErrorResponse, HealthResponse
from hrdesk.presentation.api.schemas.operations import (
    AddEmployeeArguments,
    EmployeeIdArguments,
    LoginArguments,
    NoArguments,
    OperationName,
    OperationRequest,
    OperationResponse,
    SearchEmployeesArguments,
    SignupArguments,
    UpdateEmployeeArguments,
)

__all__ = [
    "AddEmployeeArguments",
    "EmployeeIdArguments",
    "ErrorResponse",
    "HealthResponse",
    "LoginArguments",
    "NoArguments",
    "OperationName",
    "OperationRequest",
    "OperationResponse",
    "SearchEmployeesArguments",
    "SignupArguments",
    "UpdateEmployeeArguments",
]
