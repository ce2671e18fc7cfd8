from datetime import datetime
from typing import Optional

import attrs

from src.service.booking.domain.entity.room_entity import Room
from src.service.booking.domain.enum.booking_ownership import BookingOwnership


@attrs.define
class Booking:
    id: int
    user_id: int
    room_id: int
    room: Optional[Room] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def check_ownership(
        booking: Optional['Booking'], *, user_id: int, booking_id: Optional[int] = None
    ) -> BookingOwnership:
        """
        Decide whether `user_id` may modify `booking` (the caller's current booking).

        When `booking_id` is given it must name that same booking.
        """
        if booking is None:
            return BookingOwnership.NOT_FOUND
        if booking.user_id != user_id:
            return BookingOwnership.NOT_OWNER
        if booking_id is not None and booking.id != booking_id:
            return BookingOwnership.NOT_OWNER
        return BookingOwnership.AUTHORIZED
