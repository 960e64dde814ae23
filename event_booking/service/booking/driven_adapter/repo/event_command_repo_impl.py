"""
Event Command Repository Implementation - write side (raw SQL with asyncpg)

Capacity changes read and write the event row inside one transaction holding
its `FOR UPDATE` lock, so they serialise with concurrent bookings.
"""

from typing import Any, Mapping

from event_booking.platform.database.asyncpg_setting import get_asyncpg_pool
from event_booking.platform.database.column_range import is_storable_id
from event_booking.platform.database.store_error import store_errors
from event_booking.platform.database.transaction import (
    PoolFactory,
    acquire_connection,
    transaction,
)
from event_booking.platform.exception.exceptions import NotFoundError
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_event_command_repo import IEventCommandRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


EVENT_COLUMNS = 'id, name, description, total_seats, seats_available, created_at, updated_at'


def row_to_event(row: Mapping[str, Any]) -> EventEntity:
    return EventEntity(
        id=row['id'],
        name=row['name'],
        description=row['description'],
        total_seats=row['total_seats'],
        seats_available=row['seats_available'],
        created_at=row['created_at'],
        updated_at=row['updated_at'],
    )


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, pool_factory: PoolFactory = get_asyncpg_pool) -> None:
        self.pool_factory = pool_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with store_errors():
            async with acquire_connection(self.pool_factory) as conn:
                row = await conn.fetchrow(
                    f"""
                    INSERT INTO events (name, description, total_seats, seats_available)
                    VALUES ($1, $2, $3, $4)
                    RETURNING {EVENT_COLUMNS}
                    """,
                    event.name,
                    event.description,
                    event.total_seats,
                    event.seats_available,
                )

        Logger.base.info(f'🎫 [CREATE_EVENT] Created event {row["id"]} ({row["total_seats"]} seats)')
        return row_to_event(row)

    @Logger.io
    async def update(self, *, event_id: int, patch: EventPatch) -> EventEntity:
        if not is_storable_id(event_id):
            raise NotFoundError('Event not found')
        async with store_errors():
            async with acquire_connection(self.pool_factory) as conn:
                async with transaction(conn):
                    row = await conn.fetchrow(
                        f'SELECT {EVENT_COLUMNS} FROM events WHERE id = $1 FOR UPDATE',
                        event_id,
                    )
                    if row is None:
                        raise NotFoundError('Event not found')

                    event = row_to_event(row)
                    event.apply_patch(patch)

                    updated = await conn.fetchrow(
                        f"""
                        UPDATE events
                        SET name = $2, description = $3, total_seats = $4,
                            seats_available = $5, updated_at = now()
                        WHERE id = $1
                        RETURNING {EVENT_COLUMNS}
                        """,
                        event_id,
                        event.name,
                        event.description,
                        event.total_seats,
                        event.seats_available,
                    )

        return row_to_event(updated)

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        if not is_storable_id(event_id):
            raise NotFoundError('Event not found')
        async with store_errors():
            async with acquire_connection(self.pool_factory) as conn:
                deleted_id = await conn.fetchval(
                    'DELETE FROM events WHERE id = $1 RETURNING id', event_id
                )

        if deleted_id is None:
            raise NotFoundError('Event not found')
        Logger.base.info(f'🗑️ [DELETE_EVENT] Deleted event {event_id} and its bookings')
