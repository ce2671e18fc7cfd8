from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CannotBookError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_ownership import BookingOwnership


class ChangeBookingUseCase:
    """
    Move the user's existing booking to another room

    Flow (single transaction):
    1. Eligibility check
    2. Lock the target room and re-check its capacity
    3. Resolve the caller's current booking and check ownership
    4. Upsert the booking with the new room and commit
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        eligibility_checker: BookingEligibilityChecker,
    ) -> None:
        self.uow = uow
        self.eligibility_checker = eligibility_checker
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        eligibility_checker: BookingEligibilityChecker = Depends(
            Provide[Container.booking_eligibility_checker]
        ),
    ) -> Self:
        return cls(uow=uow, eligibility_checker=eligibility_checker)

    @Logger.io
    async def change_booking(
        self, *, user_id: int, room_id: int, booking_id: Optional[int] = None
    ) -> Booking:
        """
        Args:
            user_id: caller
            room_id: target room
            booking_id: booking named by the caller; must be the caller's current booking

        Raises:
            CannotBookError: ineligible user, full room, or booking not owned by the caller
            NotFoundError: target room does not exist
        """
        with self.tracer.start_as_current_span(
            'use_case.change_booking',
            attributes={'user.id': user_id, 'room.id': room_id},
        ):
            async with self.uow:
                await self.eligibility_checker.validate(uow=self.uow, user_id=user_id)

                room = await self.uow.room_query_repo.get_by_id(room_id=room_id, for_update=True)
                if not room:
                    raise NotFoundError('Room not found')

                # The caller's own booking counts too, even when it already sits in this room
                room_bookings = await self.uow.booking_query_repo.list_by_room_id(room_id=room_id)
                room.validate_vacancy(current_booking_count=len(room_bookings))

                current_booking = await self.uow.booking_query_repo.get_by_user_id(user_id=user_id)
                ownership = Booking.check_ownership(
                    current_booking, user_id=user_id, booking_id=booking_id
                )
                if ownership != BookingOwnership.AUTHORIZED or current_booking is None:
                    Logger.base.info(
                        f'🚫 [CHANGE-BOOKING] user {user_id} booking {booking_id}: {ownership}'
                    )
                    raise CannotBookError()

                booking = await self.uow.booking_command_repo.upsert(
                    booking_id=current_booking.id, user_id=user_id, room_id=room_id
                )
                await self.uow.commit()

            Logger.base.info(
                f'🔁 [CHANGE-BOOKING] booking {booking.id}: user {user_id} -> room {room_id}'
            )
            return booking
