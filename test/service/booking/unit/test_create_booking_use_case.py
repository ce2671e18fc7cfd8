"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Eligible user + free room -> booking created and committed
2. Room missing -> NotFoundError, full room -> CannotBookError
3. The room is read with a row lock
4. Nothing is committed on failure
"""

import pytest

from src.platform.exception.exceptions import CannotBookError, NotFoundError
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.domain.enum import TicketStatus


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.fixture
    def use_case(self, uow):
        return CreateBookingUseCase(uow=uow, eligibility_checker=BookingEligibilityChecker())

    @pytest.mark.asyncio
    async def test_create_booking_in_empty_room(self, use_case, uow, store):
        # Given
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=3, capacity=1)

        # When
        booking = await use_case.create_booking(user_id=1, room_id=3)

        # Then
        assert booking.user_id == 1
        assert booking.room_id == 3
        assert store.bookings[booking.id] == booking
        assert uow.committed is True
        assert uow.room_query_repo.locked_room_ids == [3]

    @pytest.mark.asyncio
    async def test_created_booking_is_returned_by_get_booking(self, use_case, uow, store):
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=3, capacity=2)

        created = await use_case.create_booking(user_id=1, room_id=3)
        fetched = await GetBookingUseCase(
            uow=uow, eligibility_checker=BookingEligibilityChecker()
        ).get_booking(user_id=1)

        assert fetched.id == created.id
        assert fetched.room_id == 3

    @pytest.mark.asyncio
    async def test_missing_room_is_not_found(self, use_case, uow, store):
        store.add_eligible_user(user_id=1)

        with pytest.raises(NotFoundError):
            await use_case.create_booking(user_id=1, room_id=99)

        assert uow.committed is False
        assert store.bookings == {}

    @pytest.mark.asyncio
    async def test_full_room_cannot_book(self, use_case, uow, store):
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=3, capacity=1)
        store.add_booking(user_id=2, room_id=3)

        with pytest.raises(CannotBookError):
            await use_case.create_booking(user_id=1, room_id=3)

        assert uow.committed is False
        assert len(store.bookings) == 1

    @pytest.mark.asyncio
    async def test_unpaid_ticket_cannot_book(self, use_case, uow, store):
        store.add_eligible_user(user_id=1, status=TicketStatus.RESERVED)
        store.add_room(room_id=3, capacity=1)

        with pytest.raises(CannotBookError):
            await use_case.create_booking(user_id=1, room_id=3)

        assert store.bookings == {}

    @pytest.mark.asyncio
    async def test_eligibility_is_checked_before_room_lookup(self, use_case, uow):
        # No enrollment and no room: the ineligibility wins
        with pytest.raises(CannotBookError):
            await use_case.create_booking(user_id=1, room_id=99)

        assert uow.room_query_repo.locked_room_ids == []
