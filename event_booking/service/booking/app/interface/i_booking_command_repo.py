from abc import ABC, abstractmethod

from event_booking.service.booking.domain.entity.booking_entity import BookingEntity


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def reserve_seats(self, *, booking: BookingEntity) -> BookingEntity:
        """
        Lock the event row, check capacity, decrement seats_available and insert
        the booking in one transaction.

        Raises:
            NotFoundError: event (or user, if deleted meanwhile) does not exist
            InsufficientCapacityError: seats_available < booking.seats_reserved
            StoreTimeoutError: pool acquire, lock wait or statement timed out
        """
        pass
