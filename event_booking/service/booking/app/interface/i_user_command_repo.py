from abc import ABC, abstractmethod

from event_booking.service.booking.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        """Raises ConflictError when the email is already registered."""
        pass
