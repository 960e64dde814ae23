from datetime import datetime
from typing import Any, Optional

import attrs

from event_booking.platform.exception.exceptions import (
    InsufficientCapacityError,
    ValidationError,
)
from event_booking.platform.logging.loguru_io import Logger
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


CREATE_EVENT_INVALID = 'Name and positive total_seats are required'


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _validate_name(instance: object, attribute: attrs.Attribute, value: Optional[str]) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(CREATE_EVENT_INVALID)


def _validate_total_seats(instance: object, attribute: attrs.Attribute, value: Any) -> None:
    if not _is_positive_int(value):
        raise ValidationError(CREATE_EVENT_INVALID)


def _validate_seats_available(
    instance: 'EventEntity', attribute: attrs.Attribute, value: Any
) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError('seats_available must be an integer')
    if not 0 <= value <= instance.total_seats:
        raise ValidationError('seats_available must be between 0 and total_seats')


@attrs.define
class EventEntity:
    name: str = attrs.field(validator=_validate_name)
    total_seats: int = attrs.field(validator=_validate_total_seats)
    description: Optional[str] = None
    seats_available: int = attrs.field(
        default=attrs.Factory(lambda self: self.total_seats, takes_self=True),
        validator=_validate_seats_available,
    )
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls, *, name: Optional[str], total_seats: Any, description: Optional[str] = None
    ) -> 'EventEntity':
        return cls(
            name=name.strip() if isinstance(name, str) else name,  # type: ignore[arg-type]
            total_seats=total_seats,
            description=description,
        )

    @property
    def booked_seats(self) -> int:
        return self.total_seats - self.seats_available

    def apply_patch(self, patch: EventPatch) -> None:
        """
        Merge a partial update. A new capacity keeps every seat already booked:
        seats_available becomes new_total - booked.
        """
        if patch.name is not None:
            self.name = patch.name.strip()
        if patch.description is not None:
            self.description = patch.description
        if patch.total_seats is not None:
            booked = self.booked_seats
            if patch.total_seats < booked:
                raise ValidationError('New total_seats is less than already booked seats')
            self._resize(patch.total_seats, patch.total_seats - booked)

    def reserve_seats(self, seats: int) -> None:
        if seats > self.seats_available:
            raise InsufficientCapacityError('Not enough seats available')
        self.seats_available -= seats

    def _resize(self, total_seats: int, seats_available: int) -> None:
        # Assignment order keeps 0 <= seats_available <= total_seats at every step
        if total_seats >= self.total_seats:
            self.total_seats = total_seats
            self.seats_available = seats_available
        else:
            self.seats_available = seats_available
            self.total_seats = total_seats
