"""SQLAlchemy models. Importing this package registers every table."""

from hrdesk.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from hrdesk.infrastructure.persistence.sqlalchemy.models.employee_model import (
    EmployeeModel,
)
from hrdesk.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "EmployeeModel",
    "TimestampMixin",
    "UserModel",
]
