from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CannotBookError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.entity.enrollment_entity import Enrollment


class BookingEligibilityChecker:
    """
    Decides whether a user may hold a hotel booking at all

    Rules (all must hold):
    1. The user has an enrollment
    2. The enrollment has a ticket
    3. The ticket is paid, not remote, and includes hotel accommodation

    Every rejection surfaces as CannotBookError; the concrete reason is only logged.
    """

    @Logger.io
    async def validate(self, *, uow: AbstractUnitOfWork, user_id: int) -> Enrollment:
        enrollment = await uow.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
        if not enrollment:
            Logger.base.info(f'🚫 [ELIGIBILITY] user {user_id} has no enrollment')
            raise CannotBookError()

        ticket = await uow.ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id)
        if not ticket:
            Logger.base.info(f'🚫 [ELIGIBILITY] user {user_id} has no ticket')
            raise CannotBookError()

        try:
            ticket.validate_bookable()
        except CannotBookError as e:
            Logger.base.info(f'🚫 [ELIGIBILITY] user {user_id}: {e.message}')
            raise CannotBookError() from e

        return enrollment
