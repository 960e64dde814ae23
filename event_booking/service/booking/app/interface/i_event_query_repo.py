from abc import ABC, abstractmethod
from typing import List, Optional

from event_booking.service.booking.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_events(self) -> List[EventEntity]:
        """Newest-created first"""
        pass
