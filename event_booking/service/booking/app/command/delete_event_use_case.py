from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from event_booking.platform.config.di import Container
from event_booking.platform.logging.loguru_io import Logger
from event_booking.platform.metrics.booking_metrics import metrics
from event_booking.service.booking.app.interface.i_event_command_repo import IEventCommandRepo


class DeleteEventUseCase:
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
    async def delete(self, *, event_id: int) -> None:
        await self.event_command_repo.delete(event_id=event_id)
        metrics.record_event_write(operation='delete', result='success')
