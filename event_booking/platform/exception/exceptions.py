class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    retryable: bool = False

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed or missing input, including store-level CHECK violations."""


class InsufficientCapacityError(DomainError):
    """Requested seats exceed the event's current seats_available."""


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class StoreTimeoutError(CustomBaseError):
    """Pool acquire, lock wait or statement exceeded its bound. Safe to retry."""

    retryable = True

    def __init__(self, message: str = 'Database operation timed out') -> None:
        super().__init__(message, 500)


class InternalError(CustomBaseError):
    def __init__(self, message: str = 'Internal server error') -> None:
        super().__init__(message, 500)
