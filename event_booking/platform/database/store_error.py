"""
Translation of driver failures into the service error taxonomy.

Both asyncpg and SQLAlchemy (whose asyncpg dialect wraps the driver error)
expose the PostgreSQL SQLSTATE, so classification keys off that code.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from sqlalchemy import exc as sa_exc

from event_booking.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    InternalError,
    NotFoundError,
    StoreTimeoutError,
    ValidationError,
)


UNIQUE_VIOLATION = '23505'
FOREIGN_KEY_VIOLATION = '23503'
CHECK_VIOLATION = '23514'
QUERY_CANCELED = '57014'
LOCK_NOT_AVAILABLE = '55P03'
# Class 22: data exceptions, including asyncpg's client-side argument encoding errors
DATA_EXCEPTION_CLASS = '22'

_TIMEOUT_SQLSTATES = {QUERY_CANCELED, LOCK_NOT_AVAILABLE}


def _sqlstate(exc: BaseException) -> Optional[str]:
    """Walk `.orig` / `__cause__` until something carries a SQLSTATE."""
    seen: set[int] = set()
    current: Any = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        code = getattr(current, 'sqlstate', None) or getattr(current, 'pgcode', None)
        if isinstance(code, str):
            return code
        current = getattr(current, 'orig', None) or current.__cause__
    return None


def translate_store_error(
    exc: BaseException,
    *,
    conflict_message: str = 'Resource already exists',
    not_found_message: str = 'Referenced resource not found',
) -> CustomBaseError:
    if isinstance(exc, CustomBaseError):
        return exc

    if isinstance(exc, (asyncio.TimeoutError, sa_exc.TimeoutError)):
        return StoreTimeoutError()

    code = _sqlstate(exc)
    if code == UNIQUE_VIOLATION:
        return ConflictError(conflict_message)
    if code == FOREIGN_KEY_VIOLATION:
        return NotFoundError(not_found_message)
    if code == CHECK_VIOLATION:
        return ValidationError('Value violates a store constraint')
    if code is not None and code.startswith(DATA_EXCEPTION_CLASS):
        return ValidationError('Value is not valid for a stored field')
    if code in _TIMEOUT_SQLSTATES:
        return StoreTimeoutError()

    return InternalError()


@asynccontextmanager
async def store_errors(
    *,
    conflict_message: str = 'Resource already exists',
    not_found_message: str = 'Referenced resource not found',
) -> AsyncIterator[None]:
    """Re-raise anything escaping the block as a `CustomBaseError`."""
    try:
        yield
    except CustomBaseError:
        raise
    except Exception as e:
        raise translate_store_error(
            e, conflict_message=conflict_message, not_found_message=not_found_message
        ) from e
