"""Operation handlers."""

from hrdesk.application.services.authentication_service import (
    AuthenticationService,
)
from hrdesk.application.services.employee_service import EmployeeService
from hrdesk.application.services.error_boundary import handle_errors

__all__ = ["AuthenticationService", "EmployeeService", "handle_errors"]
