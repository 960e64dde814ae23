from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.exception.exceptions import CustomBaseError
from event_booking.platform.logging.loguru_io import Logger
from event_booking.platform.metrics.booking_metrics import metrics
from event_booking.service.booking.app.interface.i_event_command_repo import IEventCommandRepo
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


class UpdateEventUseCase:
    """
    Partial update. A new total_seats keeps every booked seat booked, so it may
    not drop below the already-booked count.
    """

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
    async def update(
        self,
        *,
        event_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        total_seats: Any = None,
    ) -> EventEntity:
        patch = EventPatch(name=name, description=description, total_seats=total_seats)
        try:
            event = await self.event_command_repo.update(event_id=event_id, patch=patch)
        except CustomBaseError:
            metrics.record_event_write(operation='update', result='failure')
            raise

        metrics.record_event_write(operation='update', result='success')
        Logger.base.info(
            f'✏️ [UPDATE_EVENT] Event {event_id}: {event.seats_available}/{event.total_seats} seats'
        )
        return event
