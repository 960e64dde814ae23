from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt


class EventCreateRequest(BaseModel):
    # Presence and positivity are checked by the domain so they surface as 400s
    # with the service's own message
    name: Optional[str] = None
    description: Optional[str] = None
    total_seats: Optional[StrictInt] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Concert',
                'description': 'Open-air concert',
                'total_seats': 10,
            }
        }
    )


class EventUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    total_seats: Optional[StrictInt] = None

    model_config = ConfigDict(json_schema_extra={'example': {'total_seats': 20}})


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    total_seats: int
    seats_available: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventCreatedResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    total_seats: int
    message: str = 'Event created'


class MessageResponse(BaseModel):
    message: str
