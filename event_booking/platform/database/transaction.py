from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable

import asyncpg

from event_booking.platform.config.core_setting import settings
from event_booking.platform.logging.loguru_io import Logger


PoolFactory = Callable[[], Awaitable[Any]]


@asynccontextmanager
async def acquire_connection(pool_factory: PoolFactory) -> AsyncIterator[asyncpg.Connection]:
    """Borrow a pooled connection; it goes back to the pool on every exit path."""
    pool = await pool_factory()
    async with pool.acquire(timeout=settings.DB_POOL_ACQUIRE_TIMEOUT) as conn:
        yield conn


@asynccontextmanager
async def transaction(conn: asyncpg.Connection) -> AsyncIterator[asyncpg.Connection]:
    """
    Commit on clean exit, roll back otherwise.

    Unlike `async with conn.transaction()`, a failing ROLLBACK never replaces
    the error that caused it: the rollback failure is logged and the original
    exception propagates.
    """
    tr = conn.transaction()
    await tr.start()
    try:
        yield conn
    except BaseException as original:
        try:
            await tr.rollback()
        except Exception as rollback_error:
            Logger.base.error(
                f'⚠️ [TX] Rollback failed after {type(original).__name__}: '
                f'{type(rollback_error).__name__}: {rollback_error}'
            )
        raise
    await tr.commit()
