from typing import Any, Optional

import attrs

from event_booking.platform.exception.exceptions import ValidationError


def _validate_optional_name(instance: object, attribute: attrs.Attribute, value: Any) -> None:
    if value is not None and (not isinstance(value, str) or not value.strip()):
        raise ValidationError('Event name cannot be empty')


def _validate_optional_total_seats(instance: object, attribute: attrs.Attribute, value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValidationError('total_seats must be a positive integer')


@attrs.frozen
class EventPatch:
    """Partial event update; a None field is left unchanged."""

    name: Optional[str] = attrs.field(default=None, validator=_validate_optional_name)
    description: Optional[str] = None
    total_seats: Optional[int] = attrs.field(default=None, validator=_validate_optional_total_seats)

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.description is None and self.total_seats is None
