from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        """First booking of the user with its room loaded, or None"""
        pass

    @abstractmethod
    async def list_by_room_id(self, *, room_id: int) -> List[Booking]:
        """All bookings of the room, each with its room loaded"""
        pass
