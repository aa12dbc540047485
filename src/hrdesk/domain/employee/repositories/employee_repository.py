"""Employee repository interface."""

from hrdesk.domain.employee.aggregates.employee import Employee
from hrdesk.domain.shared.repository import RecordRepository


class EmployeeRepository(RecordRepository[Employee]):
    """Repository interface for Employee aggregates.

    ``update_by_id`` is a merge patch: keys absent from ``fields`` are left
    untouched, and an ``attributes`` entry is merged key by key into the
    stored extra fields.
    """
