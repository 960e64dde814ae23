from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.interface.i_event_query_repo import IEventQueryRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
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
    async def list_events(self) -> List[EventEntity]:
        return await self.event_query_repo.list_events()
