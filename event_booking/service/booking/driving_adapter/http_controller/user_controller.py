from typing import List

from fastapi import APIRouter, Depends, status

from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.app.command.create_user_use_case import CreateUserUseCase
from event_booking.service.booking.app.query.get_user_use_case import GetUserUseCase
from event_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from event_booking.service.booking.driving_adapter.schema.booking_schema import (
    UserBookingResponse,
)
from event_booking.service.booking.driving_adapter.schema.user_schema import (
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=UserCreatedResponse)
@Logger.io
async def create_user(
    request: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> UserCreatedResponse:
    user = await use_case.create(name=request.name, email=request.email)
    return UserCreatedResponse(id=user.id or 0, name=user.name, email=user.email)


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
async def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> UserResponse:
    user = await use_case.get_by_id(user_id=user_id)
    return UserResponse.model_validate(user)


@router.get('/{user_id}/bookings', response_model=List[UserBookingResponse])
@Logger.io
async def list_user_bookings(
    user_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[UserBookingResponse]:
    rows = await use_case.for_user(user_id=user_id)
    return [UserBookingResponse(**row) for row in rows]
