"""Data transfer objects returned by the operation handlers."""

from hrdesk.application.dtos.employee_dto import DeleteResultDTO, EmployeeDTO
from hrdesk.application.dtos.user_dto import AuthResultDTO, UserDTO

__all__ = [
    "AuthResultDTO",
    "DeleteResultDTO",
    "EmployeeDTO",
    "UserDTO",
]
