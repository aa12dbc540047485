from hrdesk.domain.employee.aggregates.employee import (
    CORE_FIELDS,
    FIELD_MAX_LENGTH,
    RESERVED_FIELDS,
    Employee,
)

__all__ = ["CORE_FIELDS", "FIELD_MAX_LENGTH", "RESERVED_FIELDS", "Employee"]
