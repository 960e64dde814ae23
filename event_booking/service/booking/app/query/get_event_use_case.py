from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.exception.exceptions import NotFoundError
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_event_query_repo import IEventQueryRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> EventEntity:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')
        return event
