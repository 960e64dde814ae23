from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.logging.loguru_io import Logger
from event_booking.platform.metrics.booking_metrics import metrics
from event_booking.service.booking.app.interface.i_event_command_repo import IEventCommandRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity


class CreateEventUseCase:
    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def create(
        self, *, name: Optional[str], total_seats: Any, description: Optional[str] = None
    ) -> EventEntity:
        # Validation happens before anything touches the store
        event = EventEntity.create(name=name, total_seats=total_seats, description=description)
        created = await self.event_command_repo.create(event=event)
        metrics.record_event_write(operation='create', result='success')
        return created
