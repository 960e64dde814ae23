"""
asyncpg pool for the write path (row locks, raw SQL).

Pools are keyed by event loop: production has one loop for the process
lifetime, while pytest-asyncio gives every test a fresh loop and a pool
cannot be shared across loops.
"""

import asyncio

import asyncpg

from event_booking.platform.config.core_setting import settings
from event_booking.platform.logging.loguru_io import Logger


asyncpg_pools: dict[int, asyncpg.Pool] = {}


def _pool_stats(pool: asyncpg.Pool) -> str:
    return (
        f'size={pool.get_size()} idle={pool.get_idle_size()} '
        f'bounds={pool.get_min_size()}..{pool.get_max_size()}'
    )


async def _create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        settings.DATABASE_DSN,
        min_size=settings.ASYNCPG_POOL_MIN_SIZE,
        max_size=settings.ASYNCPG_POOL_MAX_SIZE,
        command_timeout=settings.DB_COMMAND_TIMEOUT,
        max_inactive_connection_lifetime=settings.ASYNCPG_POOL_MAX_INACTIVE_LIFETIME,
        timeout=settings.ASYNCPG_POOL_CONNECT_TIMEOUT,
        max_queries=settings.ASYNCPG_POOL_MAX_QUERIES,
        server_settings=settings.DB_SERVER_SETTINGS,
    )
    Logger.base.info(
        f'🔗 [Pool] asyncpg pool opened ({_pool_stats(pool)}, '
        f'lock_timeout={settings.DB_LOCK_TIMEOUT_MS}ms, '
        f'statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}ms)'
    )
    return pool


async def get_asyncpg_pool() -> asyncpg.Pool:
    loop_id = id(asyncio.get_running_loop())
    pool = asyncpg_pools.get(loop_id)
    if pool is None:
        pool = asyncpg_pools[loop_id] = await _create_pool()
    return pool


async def warmup_asyncpg_pool() -> int:
    """
    Open MIN_SIZE connections up front and return them to the pool, so the
    first bookings after start-up do not pay the connect cost.

    Returns how many connections were checked out; a timeout stops the warmup
    early without failing start-up.
    """
    pool = await get_asyncpg_pool()
    target = settings.ASYNCPG_POOL_MIN_SIZE
    results = await asyncio.gather(
        *(pool.acquire(timeout=settings.DB_POOL_ACQUIRE_TIMEOUT) for _ in range(target)),
        return_exceptions=True,
    )

    connections = [conn for conn in results if not isinstance(conn, BaseException)]
    for conn in connections:
        await pool.release(conn)

    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, asyncio.TimeoutError):
            raise result

    if len(connections) < target:
        Logger.base.warning(f'⚠️ [Pool Warmup] Only {len(connections)}/{target} connections opened')
    Logger.base.info(f'🔥 [Pool Warmup] Done ({_pool_stats(pool)})')
    return len(connections)


async def close_asyncpg_pool() -> None:
    """Close the pool owned by the current event loop."""
    pool = asyncpg_pools.pop(id(asyncio.get_running_loop()), None)
    if pool is not None:
        await pool.close()
        Logger.base.info('🔌 [Pool] asyncpg pool closed')


async def close_all_asyncpg_pools() -> None:
    """Shutdown only. Pools bound to other loops are terminated rather than awaited."""
    current_loop_id = id(asyncio.get_running_loop())
    while asyncpg_pools:
        loop_id, pool = asyncpg_pools.popitem()
        if loop_id == current_loop_id:
            await pool.close()
        else:
            pool.terminate()
