HEALTH = '/health'

# Events
EVENT_BASE = '/api/events'
EVENT_LIST = EVENT_BASE
EVENT_CREATE = EVENT_BASE
EVENT_GET = '/api/events/{event_id}'
EVENT_UPDATE = EVENT_GET
EVENT_DELETE = EVENT_GET
EVENT_BOOKINGS = '/api/events/{event_id}/bookings'

# Users
USER_BASE = '/api/users'
USER_CREATE = USER_BASE
USER_GET = '/api/users/{user_id}'
USER_BOOKINGS = '/api/users/{user_id}/bookings'

# Bookings
BOOKING_BASE = '/api/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
