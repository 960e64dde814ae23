from abc import ABC, abstractmethod

from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


class IEventCommandRepo(ABC):
    """Event Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def update(self, *, event_id: int, patch: EventPatch) -> EventEntity:
        """Apply the patch under the event row lock. Raises NotFoundError when absent."""
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> None:
        """Delete the event and, by cascade, its bookings. Raises NotFoundError when absent."""
        pass
