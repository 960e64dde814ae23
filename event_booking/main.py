"""
Production FastAPI Application

Run with `event-booking` (granian) or `python -m event_booking.main`.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from granian import Granian
from granian.constants import Interfaces

from event_booking.platform.app_factory import create_app
from event_booking.platform.config.core_setting import settings
from event_booking.platform.config.di import cleanup, container
from event_booking.platform.config.wire_modules import WIRE_MODULES
from event_booking.platform.database.asyncpg_setting import (
    close_all_asyncpg_pools,
    get_asyncpg_pool,
    warmup_asyncpg_pool,
)
from event_booking.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from event_booking.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Event Booking] Starting up...')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Event Booking] Schema ready')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Event Booking] Dependency injection wired')

    # Pool must exist before the first request is served
    await get_asyncpg_pool()
    Logger.base.info('🏊 [Event Booking] Asyncpg pool initialized')

    await warmup_asyncpg_pool()
    Logger.base.info('✅ [Event Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Event Booking] Shutting down...')

    await close_all_asyncpg_pools()
    Logger.base.info('🏊 [Event Booking] Asyncpg pools closed')

    await dispose_engine()

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Event Booking] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Event Booking - events, users and capacity-safe seat reservations',
)


def run() -> None:
    Granian(
        target='event_booking.main:app',
        address=settings.HOST,
        port=settings.PORT,
        interface=Interfaces.ASGI,
        workers=settings.WORKERS,
    ).serve()


if __name__ == '__main__':
    run()
