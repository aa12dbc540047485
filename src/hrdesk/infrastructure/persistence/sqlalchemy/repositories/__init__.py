from hrdesk.infrastructure.persistence.sqlalchemy.repositories.employee_repository import (  # noqa: E501
    EmployeeRepositorySQLAlchemy,
)
from hrdesk.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "EmployeeRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
