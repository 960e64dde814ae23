from typing import Any, AsyncContextManager, Callable, Dict, List

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.platform.database.column_range import is_storable_id
from event_booking.platform.database.store_error import store_errors
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from event_booking.service.booking.driven_adapter.model.booking_model import BookingModel
from event_booking.service.booking.driven_adapter.model.event_model import EventModel
from event_booking.service.booking.driven_adapter.model.user_model import UserModel


_NEWEST_FIRST = (BookingModel.created_at.desc(), BookingModel.id.desc())


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    async def _fetch_rows(self, stmt: Select) -> List[Dict[str, Any]]:
        async with store_errors():
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return [dict(row) for row in result.mappings().all()]

    @Logger.io
    async def list_for_event(self, *, event_id: int) -> List[Dict[str, Any]]:
        if not is_storable_id(event_id):
            return []
        stmt = (
            select(
                BookingModel.id,
                BookingModel.seats_reserved,
                BookingModel.created_at,
                UserModel.id.label('user_id'),
                UserModel.name.label('user_name'),
                UserModel.email.label('user_email'),
            )
            .select_from(BookingModel)
            .join(UserModel, UserModel.id == BookingModel.user_id)
            .where(BookingModel.event_id == event_id)
            .order_by(*_NEWEST_FIRST)
        )
        return await self._fetch_rows(stmt)

    @Logger.io
    async def list_for_user(self, *, user_id: int) -> List[Dict[str, Any]]:
        if not is_storable_id(user_id):
            return []
        stmt = (
            select(
                BookingModel.id,
                BookingModel.seats_reserved,
                BookingModel.created_at,
                EventModel.id.label('event_id'),
                EventModel.name.label('event_name'),
            )
            .select_from(BookingModel)
            .join(EventModel, EventModel.id == BookingModel.event_id)
            .where(BookingModel.user_id == user_id)
            .order_by(*_NEWEST_FIRST)
        )
        return await self._fetch_rows(stmt)

    @Logger.io
    async def list_all(self) -> List[Dict[str, Any]]:
        stmt = (
            select(
                BookingModel.id,
                BookingModel.seats_reserved,
                BookingModel.created_at,
                UserModel.id.label('user_id'),
                UserModel.name.label('user_name'),
                EventModel.id.label('event_id'),
                EventModel.name.label('event_name'),
            )
            .select_from(BookingModel)
            .join(UserModel, UserModel.id == BookingModel.user_id)
            .join(EventModel, EventModel.id == BookingModel.event_id)
            .order_by(*_NEWEST_FIRST)
        )
        return await self._fetch_rows(stmt)
