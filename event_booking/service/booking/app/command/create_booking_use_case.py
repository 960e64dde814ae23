import time
from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.exception.exceptions import (
    CustomBaseError,
    InsufficientCapacityError,
    NotFoundError,
    StoreTimeoutError,
)
from event_booking.platform.logging.loguru_io import Logger
from event_booking.platform.metrics.booking_metrics import metrics
from event_booking.service.booking.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from event_booking.service.booking.app.interface.i_user_query_repo import IUserQueryRepo
from event_booking.service.booking.domain.entity.booking_entity import BookingEntity


def _result_label(error: CustomBaseError) -> str:
    if isinstance(error, InsufficientCapacityError):
        return 'insufficient_capacity'
    if isinstance(error, NotFoundError):
        return 'not_found'
    if isinstance(error, StoreTimeoutError):
        return 'timeout'
    return 'error'


class CreateBookingUseCase:
    """
    Reserve seats for a user on an event.

    Flow:
    1. Validate input (BookingEntity.create)
    2. Check the user exists, outside the reservation transaction
    3. Lock the event row, check capacity, decrement and insert (repo, one transaction)

    Capacity is only checked while the row lock is held, so concurrent
    requests for the same event never oversell.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(booking_command_repo=booking_command_repo, user_query_repo=user_query_repo)

    @Logger.io
    async def create_booking(self, *, user_id: Any, event_id: Any, seats: Any) -> BookingEntity:
        booking = BookingEntity.create(user_id=user_id, event_id=event_id, seats=seats)

        if await self.user_query_repo.get_by_id(user_id=booking.user_id) is None:
            metrics.record_booking(result='not_found')
            raise NotFoundError('User not found')

        start = time.perf_counter()
        try:
            booking = await self.booking_command_repo.reserve_seats(booking=booking)
        except CustomBaseError as e:
            metrics.record_booking(
                result=_result_label(e), duration=time.perf_counter() - start
            )
            raise

        metrics.record_booking(
            result='success',
            seats=booking.seats_reserved,
            duration=time.perf_counter() - start,
        )
        return booking
