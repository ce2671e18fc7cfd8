from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker
from src.service.booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Book a room for an eligible user

    Flow (single transaction):
    1. Eligibility check (enrollment + paid in-person ticket with hotel)
    2. Lock the room row (SELECT ... FOR UPDATE)
    3. Count existing bookings of the room against its capacity
    4. Insert the booking and commit

    Concurrent requests for the same room queue on the room lock, so the
    count and the insert cannot interleave.
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
    async def create_booking(self, *, user_id: int, room_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'user.id': user_id, 'room.id': room_id},
        ) as span:
            async with self.uow:
                await self.eligibility_checker.validate(uow=self.uow, user_id=user_id)

                room = await self.uow.room_query_repo.get_by_id(room_id=room_id, for_update=True)
                if not room:
                    raise NotFoundError('Room not found')

                room_bookings = await self.uow.booking_query_repo.list_by_room_id(room_id=room_id)
                room.validate_vacancy(current_booking_count=len(room_bookings))

                booking = await self.uow.booking_command_repo.create(
                    user_id=user_id, room_id=room_id
                )
                await self.uow.commit()

            span.set_attribute('booking.id', booking.id)
            Logger.base.info(
                f'🏨 [CREATE-BOOKING] booking {booking.id}: user {user_id} -> room {room_id}'
            )
            return booking
