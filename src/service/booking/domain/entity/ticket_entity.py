from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import CannotBookError
from src.service.booking.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketType:
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@attrs.define
class Ticket:
    id: int
    enrollment_id: int
    ticket_type: TicketType
    # Upstream statuses are open ended; only RESERVED blocks a booking
    status: str = TicketStatus.RESERVED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def rejection_reason(self) -> str | None:
        """Why this ticket does not entitle its holder to a hotel room, or None if it does."""
        if self.status == TicketStatus.RESERVED:
            return 'ticket is not paid'
        if self.ticket_type.is_remote:
            return 'ticket is remote'
        if not self.ticket_type.includes_hotel:
            return 'ticket does not include hotel'
        return None

    def validate_bookable(self) -> None:
        if reason := self.rejection_reason:
            raise CannotBookError(f'Cannot book: {reason}')
