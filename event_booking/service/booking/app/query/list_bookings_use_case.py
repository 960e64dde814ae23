from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListBookingsUseCase:
    """Booking listings. An unknown event or user id yields an empty list, not a 404."""

    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def for_event(self, *, event_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_for_event(event_id=event_id)

    @Logger.io
    async def for_user(self, *, user_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_for_user(user_id=user_id)

    @Logger.io
    async def list_all(self) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_all()
