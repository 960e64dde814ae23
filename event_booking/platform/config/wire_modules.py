"""
Modules that need dependency injection wiring.
Shared between production and test apps.
"""

from types import ModuleType

from event_booking.service.booking.app.command import (
    create_booking_use_case,
    create_event_use_case,
    create_user_use_case,
    delete_event_use_case,
    update_event_use_case,
)
from event_booking.service.booking.app.query import (
    get_event_use_case,
    get_user_use_case,
    list_bookings_use_case,
    list_events_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    create_event_use_case,
    create_user_use_case,
    delete_event_use_case,
    update_event_use_case,
    get_event_use_case,
    get_user_use_case,
    list_bookings_use_case,
    list_events_use_case,
]
