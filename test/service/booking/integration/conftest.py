from collections.abc import AsyncGenerator
from dataclasses import dataclass

import pytest
from sqlalchemy import text

from event_booking.platform.database.asyncpg_setting import close_asyncpg_pool
from event_booking.platform.database.orm_db_setting import (
    Database,
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from event_booking.service.booking.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from event_booking.service.booking.app.command.create_event_use_case import CreateEventUseCase
from event_booking.service.booking.app.command.create_user_use_case import CreateUserUseCase
from event_booking.service.booking.app.command.delete_event_use_case import DeleteEventUseCase
from event_booking.service.booking.app.command.update_event_use_case import UpdateEventUseCase
from event_booking.service.booking.app.query.get_event_use_case import GetEventUseCase
from event_booking.service.booking.app.query.get_user_use_case import GetUserUseCase
from event_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from event_booking.service.booking.driven_adapter import model  # noqa: F401  registers tables
from event_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from event_booking.service.booking.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)


@dataclass
class UseCases:
    create_event: CreateEventUseCase
    update_event: UpdateEventUseCase
    delete_event: DeleteEventUseCase
    get_event: GetEventUseCase
    create_user: CreateUserUseCase
    get_user: GetUserUseCase
    create_booking: CreateBookingUseCase
    list_bookings: ListBookingsUseCase


@pytest.fixture
async def use_cases() -> AsyncGenerator[UseCases, None]:
    await create_db_and_tables()
    async with get_engine().begin() as conn:
        await conn.execute(text('TRUNCATE bookings, events, users RESTART IDENTITY CASCADE'))

    session_factory = Database().session
    event_command_repo = EventCommandRepoImpl()
    user_query_repo = UserQueryRepoImpl(session_factory=session_factory)

    yield UseCases(
        create_event=CreateEventUseCase(event_command_repo),
        update_event=UpdateEventUseCase(event_command_repo),
        delete_event=DeleteEventUseCase(event_command_repo),
        get_event=GetEventUseCase(EventQueryRepoImpl(session_factory=session_factory)),
        create_user=CreateUserUseCase(UserCommandRepoImpl()),
        get_user=GetUserUseCase(user_query_repo),
        create_booking=CreateBookingUseCase(
            booking_command_repo=BookingCommandRepoImpl(),
            user_query_repo=user_query_repo,
        ),
        list_bookings=ListBookingsUseCase(BookingQueryRepoImpl(session_factory=session_factory)),
    )

    await close_asyncpg_pool()
    await dispose_engine()
