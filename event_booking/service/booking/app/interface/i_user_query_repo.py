from abc import ABC, abstractmethod
from typing import Optional

from event_booking.service.booking.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        pass
