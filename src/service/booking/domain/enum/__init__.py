from src.service.booking.domain.enum.booking_ownership import BookingOwnership
from src.service.booking.domain.enum.ticket_status import TicketStatus

__all__ = ['BookingOwnership', 'TicketStatus']
