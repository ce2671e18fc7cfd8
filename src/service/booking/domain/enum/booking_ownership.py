from enum import StrEnum


class BookingOwnership(StrEnum):
    """Outcome of checking whether a caller may modify a booking."""

    AUTHORIZED = 'authorized'
    NOT_OWNER = 'not_owner'
    NOT_FOUND = 'not_found'
