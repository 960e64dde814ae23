from datetime import datetime
from typing import Any, Optional

import attrs

from event_booking.platform.exception.exceptions import ValidationError
from event_booking.platform.logging.loguru_io import Logger


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@attrs.define
class BookingEntity:
    """Immutable once stored; only removed by cascade with its event or user."""

    user_id: int
    event_id: int
    seats_reserved: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, user_id: Any, event_id: Any, seats: Any) -> 'BookingEntity':
        if not _is_int(user_id) or not _is_int(event_id) or not _is_int(seats) or seats <= 0:
            raise ValidationError('user_id, event_id and positive seats are required')
        return cls(user_id=user_id, event_id=event_id, seats_reserved=seats)
