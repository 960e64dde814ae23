from datetime import datetime
from typing import Any, Optional

import attrs

from event_booking.platform.exception.exceptions import ValidationError


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError('Name and email are required')


@attrs.define
class UserEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    email: str = attrs.field(validator=_validate_non_empty_string)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: Optional[str], email: Optional[str]) -> 'UserEntity':
        return cls(
            name=name.strip() if isinstance(name, str) else name,  # type: ignore[arg-type]
            email=email.strip() if isinstance(email, str) else email,  # type: ignore[arg-type]
        )
