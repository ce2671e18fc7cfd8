from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.enrollment_entity import Address, Enrollment
from src.service.booking.domain.entity.room_entity import Room
from src.service.booking.domain.entity.ticket_entity import Ticket, TicketType

__all__ = ['Address', 'Booking', 'Enrollment', 'Room', 'Ticket', 'TicketType']
