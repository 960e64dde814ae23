from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IBookingQueryRepo(ABC):
    """Listing rows are flat dicts joined with user/event details, newest first."""

    @abstractmethod
    async def list_for_event(self, *, event_id: int) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def list_for_user(self, *, user_id: int) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Dict[str, Any]]:
        pass
