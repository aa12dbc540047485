"""SQLAlchemy implementation of the record store.

Provides:
- Base: Declarative base for all models
- UserModel / EmployeeModel: table mappings
- UserRepositorySQLAlchemy / EmployeeRepositorySQLAlchemy: repositories
"""

from hrdesk.infrastructure.persistence.sqlalchemy.models import (
    Base,
    EmployeeModel,
    UserModel,
)
from hrdesk.infrastructure.persistence.sqlalchemy.repositories import (
    EmployeeRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "EmployeeModel",
    "EmployeeRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
