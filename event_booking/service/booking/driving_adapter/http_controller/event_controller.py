from typing import List

from fastapi import APIRouter, Depends, status

from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.command.create_event_use_case import CreateEventUseCase
from event_booking.service.booking.app.command.delete_event_use_case import DeleteEventUseCase
from event_booking.service.booking.app.command.update_event_use_case import UpdateEventUseCase
from event_booking.service.booking.app.query.get_event_use_case import GetEventUseCase
from event_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from event_booking.service.booking.app.query.list_events_use_case import ListEventsUseCase
from event_booking.service.booking.driving_adapter.schema.booking_schema import (
    EventBookingResponse,
)
from event_booking.service.booking.driving_adapter.schema.event_schema import (
    EventCreatedResponse,
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
    MessageResponse,
)


router = APIRouter()


@router.get('', response_model=List[EventResponse])
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events()
    return [EventResponse.model_validate(event) for event in events]


@router.get('/{event_id}', response_model=EventResponse)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_id(event_id=event_id)
    return EventResponse.model_validate(event)


@router.post('', status_code=status.HTTP_201_CREATED, response_model=EventCreatedResponse)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventCreatedResponse:
    event = await use_case.create(
        name=request.name,
        total_seats=request.total_seats,
        description=request.description,
    )
    return EventCreatedResponse(
        id=event.id or 0,
        name=event.name,
        description=event.description,
        total_seats=event.total_seats,
    )


@router.put('/{event_id}', response_model=MessageResponse)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> MessageResponse:
    await use_case.update(event_id=event_id, **request.model_dump(exclude_none=True))
    return MessageResponse(message='Event updated')


@router.delete('/{event_id}', response_model=MessageResponse)
@Logger.io
async def delete_event(
    event_id: int,
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> MessageResponse:
    await use_case.delete(event_id=event_id)
    return MessageResponse(message='Event deleted')


@router.get('/{event_id}/bookings', response_model=List[EventBookingResponse])
@Logger.io
async def list_event_bookings(
    event_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[EventBookingResponse]:
    rows = await use_case.for_event(event_id=event_id)
    return [EventBookingResponse(**row) for row in rows]
