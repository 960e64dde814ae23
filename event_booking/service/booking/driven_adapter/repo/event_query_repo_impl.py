from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.platform.database.column_range import is_storable_id
from event_booking.platform.database.store_error import store_errors
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_event_query_repo import IEventQueryRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        if not is_storable_id(event_id):
            return None
        async with store_errors():
            async with self.session_factory() as session:
                result = await session.execute(select(EventModel).where(EventModel.id == event_id))
                event_model = result.scalar_one_or_none()

        if not event_model:
            return None
        return self._model_to_entity(event_model)

    @Logger.io
    async def list_events(self) -> List[EventEntity]:
        async with store_errors():
            async with self.session_factory() as session:
                result = await session.execute(
                    select(EventModel).order_by(EventModel.created_at.desc(), EventModel.id.desc())
                )
                event_models = result.scalars().all()

        return [self._model_to_entity(model) for model in event_models]

    @staticmethod
    def _model_to_entity(event_model: EventModel) -> EventEntity:
        return EventEntity(
            id=event_model.id,
            name=event_model.name,
            description=event_model.description,
            total_seats=event_model.total_seats,
            seats_available=event_model.seats_available,
            created_at=event_model.created_at,
            updated_at=event_model.updated_at,
        )
