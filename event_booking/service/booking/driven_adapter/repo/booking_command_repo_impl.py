"""
Booking Command Repository Implementation - seat reservation protocol

    BEGIN
    SELECT ... FROM events WHERE id = $1 FOR UPDATE   -- serialises per event
    (capacity check against the locked row)
    UPDATE events SET seats_available = ...
    INSERT INTO bookings ... RETURNING id
    COMMIT

Any failure after BEGIN rolls the whole reservation back.
"""

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
from event_booking.service.booking.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from event_booking.service.booking.domain.entity.booking_entity import BookingEntity
from event_booking.service.booking.driven_adapter.repo.event_command_repo_impl import (
    EVENT_COLUMNS,
    row_to_event,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, pool_factory: PoolFactory = get_asyncpg_pool) -> None:
        self.pool_factory = pool_factory

    @Logger.io
    async def reserve_seats(self, *, booking: BookingEntity) -> BookingEntity:
        if not is_storable_id(booking.event_id):
            raise NotFoundError('Event not found')
        if not is_storable_id(booking.user_id):
            raise NotFoundError('User not found')
        # The event row is locked, so a FK failure on insert can only be the user
        async with store_errors(not_found_message='User not found'):
            async with acquire_connection(self.pool_factory) as conn:
                async with transaction(conn):
                    row = await conn.fetchrow(
                        f'SELECT {EVENT_COLUMNS} FROM events WHERE id = $1 FOR UPDATE',
                        booking.event_id,
                    )
                    if row is None:
                        raise NotFoundError('Event not found')

                    event = row_to_event(row)
                    event.reserve_seats(booking.seats_reserved)

                    await conn.execute(
                        """
                        UPDATE events
                        SET seats_available = $2, updated_at = now()
                        WHERE id = $1
                        """,
                        booking.event_id,
                        event.seats_available,
                    )
                    booking_row = await conn.fetchrow(
                        """
                        INSERT INTO bookings (user_id, event_id, seats_reserved)
                        VALUES ($1, $2, $3)
                        RETURNING id, created_at
                        """,
                        booking.user_id,
                        booking.event_id,
                        booking.seats_reserved,
                    )

        booking.id = booking_row['id']
        booking.created_at = booking_row['created_at']
        Logger.base.info(
            f'🎟️ [RESERVE] Booking {booking.id}: user {booking.user_id} took '
            f'{booking.seats_reserved} seat(s) of event {booking.event_id}, '
            f'{event.seats_available} left'
        )
        return booking
