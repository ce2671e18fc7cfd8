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


class GetBookingUseCase:
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
    async def get_booking(self, *, user_id: int) -> Booking:
        """
        Return the user's booking together with its room.

        Raises:
            CannotBookError: user is not eligible to hold a booking
            NotFoundError: user has no booking
        """
        with self.tracer.start_as_current_span(
            'use_case.get_booking', attributes={'user.id': user_id}
        ):
            async with self.uow:
                await self.eligibility_checker.validate(uow=self.uow, user_id=user_id)

                booking = await self.uow.booking_query_repo.get_by_user_id(user_id=user_id)
                if not booking:
                    raise NotFoundError('Booking not found')

                return booking
