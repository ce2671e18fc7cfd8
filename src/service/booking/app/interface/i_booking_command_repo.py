from abc import ABC, abstractmethod

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """
    Repository interface for booking writes.

    Writes are flushed, not committed; the Unit of Work commits.
    """

    @abstractmethod
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def upsert(self, *, booking_id: int, user_id: int, room_id: int) -> Booking:
        """
        Move booking `booking_id` to `room_id`, or create a booking for
        `user_id` in `room_id` when no booking has that id.
        """
        pass
