from typing import List

from fastapi import APIRouter, Depends, status

from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from event_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from event_booking.service.booking.driving_adapter.schema.booking_schema import (
    BookingCreatedResponse,
    BookingCreateRequest,
    BookingWithDetailsResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=BookingCreatedResponse)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingCreatedResponse:
    booking = await booking_use_case.create_booking(
        user_id=request.user_id,
        event_id=request.event_id,
        seats=request.seats,
    )
    return BookingCreatedResponse(booking_id=booking.id or 0)


@router.get('', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingWithDetailsResponse]:
    rows = await use_case.list_all()
    return [BookingWithDetailsResponse(**row) for row in rows]
