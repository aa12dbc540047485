"""Precondition checks run by every handler before touching the store.

All failures raise InvalidInputError; none of these functions do I/O.
"""

from typing import Any
from uuid import UUID

from hrdesk.domain.employee import RESERVED_FIELDS
from hrdesk.domain.shared.exceptions import InvalidInputError


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_fields(**fields: Any) -> None:
    """Require every given field to be present and non-blank."""
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        msg = f"Missing required field(s): {', '.join(missing)}"
        raise InvalidInputError(msg, details={"missing": missing})


def require_any(**fields: Any) -> None:
    """Require at least one of the given fields to be present."""
    if all(is_blank(value) for value in fields.values()):
        names = list(fields)
        msg = f"At least one of {' or '.join(names)} must be provided"
        raise InvalidInputError(msg, details={"fields": names})


def require_max_length(limit: int, **fields: Any) -> None:
    """Reject string fields longer than the store column allows."""
    too_long = [
        name
        for name, value in fields.items()
        if isinstance(value, str) and len(value) > limit
    ]
    if too_long:
        msg = f"Field(s) longer than {limit} characters: {', '.join(too_long)}"
        raise InvalidInputError(msg, details={"fields": too_long, "limit": limit})


def parse_id(value: Any, field_name: str = "id") -> UUID:
    """Parse a record identifier; absent or malformed ids are invalid input."""
    if isinstance(value, UUID):
        return value
    if is_blank(value):
        msg = f"Missing required field(s): {field_name}"
        raise InvalidInputError(msg, details={"missing": [field_name]})
    try:
        return UUID(str(value).strip())
    except ValueError:
        msg = f"Invalid {field_name}: not a valid identifier"
        raise InvalidInputError(msg, details={"field": field_name}) from None


def extra_attributes(extra: dict[str, Any]) -> dict[str, Any]:
    """Return the unvalidated extra employee fields exactly as given.

    Extra fields may not shadow a reserved employee field name.
    """
    clashes = sorted(key for key in extra if key in RESERVED_FIELDS)
    if clashes:
        msg = f"Reserved field(s) cannot be set: {', '.join(clashes)}"
        raise InvalidInputError(msg, details={"fields": clashes})
    return dict(extra)
