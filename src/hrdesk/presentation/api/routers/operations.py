"""Operations router: the single request/response endpoint.

Every operation arrives as ``{"operation": name, "arguments": {...}}``,
is dispatched to its handler and answered with ``{"operation", "data"}``
or a structured error.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, ValidationError

from hrdesk.application.services import AuthenticationService, EmployeeService
from hrdesk.domain.shared.exceptions import InvalidInputError
from hrdesk.presentation.api.dependencies import (
    AuthService,
    DBSession,
    EmployeeServiceDep,
    OptionalTokenPayload,
)
from hrdesk.presentation.api.exception_handlers import format_validation_errors
from hrdesk.presentation.api.schemas import (
    AddEmployeeArguments,
    EmployeeIdArguments,
    ErrorResponse,
    LoginArguments,
    NoArguments,
    OperationName,
    OperationRequest,
    OperationResponse,
    SearchEmployeesArguments,
    SignupArguments,
    UpdateEmployeeArguments,
)

logger = logging.getLogger(__name__)

router = APIRouter()

Handler = Callable[[Any, AuthenticationService, EmployeeService], Awaitable[Any]]


async def _login(args: LoginArguments, auth: AuthenticationService, _: EmployeeService):
    result = await auth.login(username=args.username, password=args.password)
    return result.to_dict()


async def _signup(args: SignupArguments, auth: AuthenticationService, _: EmployeeService):
    user = await auth.signup(
        username=args.username,
        email=args.email,
        password=args.password,
    )
    return user.to_dict()


async def _get_all_employees(
    _args: NoArguments,
    _auth: AuthenticationService,
    employees: EmployeeService,
):
    return [e.to_dict() for e in await employees.get_all()]


async def _get_employee_by_id(
    args: EmployeeIdArguments,
    _: AuthenticationService,
    employees: EmployeeService,
):
    return (await employees.get_by_id(args.id)).to_dict()


async def _search_employees(
    args: SearchEmployeesArguments,
    _: AuthenticationService,
    employees: EmployeeService,
):
    found = await employees.search(
        designation=args.designation,
        department=args.department,
    )
    return [e.to_dict() for e in found]


async def _add_employee(
    args: AddEmployeeArguments,
    _: AuthenticationService,
    employees: EmployeeService,
):
    created = await employees.add(**args.named_fields(), extra=args.extra_fields)
    return created.to_dict()


async def _update_employee_by_id(
    args: UpdateEmployeeArguments,
    _: AuthenticationService,
    employees: EmployeeService,
):
    updated = await employees.update_by_id(
        args.id,
        args.supplied_fields(),
    )
    return updated.to_dict()


async def _delete_employee_by_id(
    args: EmployeeIdArguments,
    _: AuthenticationService,
    employees: EmployeeService,
):
    return (await employees.delete_by_id(args.id)).to_dict()


OPERATIONS: dict[OperationName, tuple[type[BaseModel], Handler]] = {
    OperationName.LOGIN: (LoginArguments, _login),
    OperationName.SIGNUP: (SignupArguments, _signup),
    OperationName.GET_ALL_EMPLOYEES: (NoArguments, _get_all_employees),
    OperationName.GET_EMPLOYEE_BY_ID: (EmployeeIdArguments, _get_employee_by_id),
    OperationName.SEARCH_EMPLOYEES: (SearchEmployeesArguments, _search_employees),
    OperationName.ADD_EMPLOYEE: (AddEmployeeArguments, _add_employee),
    OperationName.UPDATE_EMPLOYEE_BY_ID: (
        UpdateEmployeeArguments,
        _update_employee_by_id,
    ),
    OperationName.DELETE_EMPLOYEE_BY_ID: (
        EmployeeIdArguments,
        _delete_employee_by_id,
    ),
}


def _parse_arguments(model: type[BaseModel], arguments: dict[str, Any]) -> BaseModel:
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        message = format_validation_errors(
            [{**err, "loc": ("arguments", *err["loc"])} for err in e.errors()],
        )
        raise InvalidInputError(message) from e


@router.post(
    "",
    summary="Execute an operation",
    responses={
        200: {"description": "Operation succeeded"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Authentication failed"},
        404: {"model": ErrorResponse, "description": "Employee not found"},
        409: {"model": ErrorResponse, "description": "Username or email taken"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    status_code=status.HTTP_200_OK,
)
async def execute_operation(
    request: OperationRequest,
    session: DBSession,
    auth_service: AuthService,
    employee_service: EmployeeServiceDep,
    token: OptionalTokenPayload,
) -> OperationResponse:
    """
    Run one of the API operations.

    Arguments per operation:
    - `login`: username, password
    - `signup`: username, email, password
    - `getAllEmployees`: none
    - `getEmployeeById`: id
    - `searchEmployeeByDesignationOrDepartment`: designation and/or department
    - `addEmployee`: first_name, last_name, optional designation, department
      and any extra fields
    - `updateEmployeeById`: id plus the fields to change
    - `deleteEmployeeById`: id

    A bearer token is optional; when present it must be valid.
    """
    model, handler = OPERATIONS[request.operation]
    arguments = _parse_arguments(model, request.arguments)

    logger.debug(
        "Executing %s (authenticated as: %s)",
        request.operation.value,
        token.username if token else None,
    )

    try:
        data = await handler(arguments, auth_service, employee_service)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return OperationResponse(operation=request.operation, data=data)
