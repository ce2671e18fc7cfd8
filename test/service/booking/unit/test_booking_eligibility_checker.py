"""
Unit tests for BookingEligibilityChecker

Every failed rule surfaces as the same CannotBookError.
"""

import pytest

from src.platform.exception.exceptions import CannotBookError
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker
from src.service.booking.domain.enum import TicketStatus


@pytest.mark.unit
class TestBookingEligibilityChecker:
    @pytest.fixture
    def checker(self):
        return BookingEligibilityChecker()

    @pytest.mark.asyncio
    async def test_eligible_user_returns_enrollment(self, checker, uow, store):
        # Given
        enrollment = store.add_eligible_user(user_id=1)

        # When
        result = await checker.validate(uow=uow, user_id=1)

        # Then
        assert result == enrollment

    @pytest.mark.asyncio
    async def test_user_without_enrollment_cannot_book(self, checker, uow):
        with pytest.raises(CannotBookError):
            await checker.validate(uow=uow, user_id=1)

    @pytest.mark.asyncio
    async def test_enrollment_without_ticket_cannot_book(self, checker, uow, store):
        store.add_enrollment(user_id=1)

        with pytest.raises(CannotBookError):
            await checker.validate(uow=uow, user_id=1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'ticket_kwargs',
        [
            {'status': TicketStatus.RESERVED},
            {'is_remote': True},
            {'includes_hotel': False},
        ],
    )
    async def test_ineligible_ticket_cannot_book(self, checker, uow, store, ticket_kwargs):
        store.add_eligible_user(user_id=1, **ticket_kwargs)

        with pytest.raises(CannotBookError) as exc_info:
            await checker.validate(uow=uow, user_id=1)

        # The reason is logged, not exposed
        assert exc_info.value.message == 'Cannot book this room'
        assert isinstance(exc_info.value.__cause__, CannotBookError)
        assert exc_info.value.__cause__.message.startswith('Cannot book: ticket')

    @pytest.mark.asyncio
    async def test_unlisted_non_reserved_status_is_eligible(self, checker, uow, store):
        # Given: a status the upstream system added after PAID
        enrollment = store.add_eligible_user(user_id=1, status='USED')

        # When
        result = await checker.validate(uow=uow, user_id=1)

        # Then
        assert result == enrollment
