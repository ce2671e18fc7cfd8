from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import CannotBookError


@attrs.define
class Room:
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate_vacancy(self, *, current_booking_count: int) -> None:
        # Every booking on the room counts, the caller's own included
        if current_booking_count >= self.capacity:
            raise CannotBookError(f'Room {self.id} is full')
