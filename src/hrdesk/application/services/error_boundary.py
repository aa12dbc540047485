"""Handler boundary that normalizes unexpected failures.

Domain exceptions already carry a stable code and pass through untouched.
Anything else (store, hashing or signing failures) is logged with its
traceback and replaced by a generic InternalError.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from hrdesk.domain.shared.exceptions import DomainException, InternalError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def handle_errors(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except DomainException:
                raise
            except Exception as e:
                logger.exception("Operation %s failed unexpectedly: %s", operation, e)
                raise InternalError() from e

        return wrapper

    return decorator
