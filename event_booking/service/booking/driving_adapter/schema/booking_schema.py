from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt


class BookingCreateRequest(BaseModel):
    user_id: Optional[StrictInt] = None
    event_id: Optional[StrictInt] = None
    seats: Optional[StrictInt] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'user_id': 1, 'event_id': 1, 'seats': 2}}
    )


class BookingCreatedResponse(BaseModel):
    booking_id: int
    message: str = 'Booking created'


class EventBookingResponse(BaseModel):
    """Booking row as listed under an event"""

    id: int
    seats_reserved: int
    created_at: Optional[datetime] = None
    user_id: int
    user_name: str
    user_email: str


class UserBookingResponse(BaseModel):
    """Booking row as listed under a user"""

    id: int
    seats_reserved: int
    created_at: Optional[datetime] = None
    event_id: int
    event_name: str


class BookingWithDetailsResponse(BaseModel):
    id: int
    seats_reserved: int
    created_at: Optional[datetime] = None
    user_id: int
    user_name: str
    event_id: int
    event_name: str
