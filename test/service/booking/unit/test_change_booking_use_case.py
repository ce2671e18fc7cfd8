"""
Unit tests for ChangeBookingUseCase

Test Focus:
1. Owner moves the booking to a room with vacancy
2. Target room missing -> NotFoundError, full -> CannotBookError
3. No current booking or a booking id that is not the caller's -> CannotBookError
4. The caller's own booking counts against the target room's capacity
"""

import pytest

from src.platform.exception.exceptions import CannotBookError, NotFoundError
from src.service.booking.app.command.change_booking_use_case import ChangeBookingUseCase
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker


@pytest.mark.unit
class TestChangeBookingUseCase:
    @pytest.fixture
    def use_case(self, uow):
        return ChangeBookingUseCase(uow=uow, eligibility_checker=BookingEligibilityChecker())

    @pytest.fixture
    def booked_user(self, store):
        """User 1 holds a booking in room 3; room 4 is empty"""
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=3, capacity=1)
        store.add_room(room_id=4, capacity=2)
        return store.add_booking(user_id=1, room_id=3)

    @pytest.mark.asyncio
    async def test_change_to_room_with_vacancy(self, use_case, uow, store, booked_user):
        booking = await use_case.change_booking(user_id=1, room_id=4, booking_id=booked_user.id)

        assert booking.id == booked_user.id
        assert store.bookings[booked_user.id].room_id == 4
        assert uow.committed is True
        assert uow.room_query_repo.locked_room_ids == [4]

    @pytest.mark.asyncio
    async def test_change_without_booking_id_uses_current_booking(
        self, use_case, store, booked_user
    ):
        booking = await use_case.change_booking(user_id=1, room_id=4)

        assert booking.id == booked_user.id
        assert store.bookings[booked_user.id].room_id == 4

    @pytest.mark.asyncio
    async def test_missing_room_is_not_found(self, use_case, uow, booked_user):
        with pytest.raises(NotFoundError):
            await use_case.change_booking(user_id=1, room_id=99, booking_id=booked_user.id)

        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_full_room_cannot_book(self, use_case, uow, store, booked_user):
        store.add_room(room_id=5, capacity=1)
        store.add_eligible_user(user_id=2)
        store.add_booking(user_id=2, room_id=5)

        with pytest.raises(CannotBookError):
            await use_case.change_booking(user_id=1, room_id=5, booking_id=booked_user.id)

        assert store.bookings[booked_user.id].room_id == 3
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_changing_into_own_full_room_is_rejected(self, use_case, store, booked_user):
        # Room 3 has capacity 1 and already holds the caller's booking
        with pytest.raises(CannotBookError):
            await use_case.change_booking(user_id=1, room_id=3, booking_id=booked_user.id)

    @pytest.mark.asyncio
    async def test_user_without_booking_cannot_change(self, use_case, uow, store):
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=4, capacity=2)

        with pytest.raises(CannotBookError):
            await use_case.change_booking(user_id=1, room_id=4, booking_id=1)

        assert store.bookings == {}
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_other_users_booking_id_cannot_change(self, use_case, store, booked_user):
        store.add_eligible_user(user_id=2)
        others_booking = store.add_booking(user_id=2, room_id=4)

        with pytest.raises(CannotBookError):
            await use_case.change_booking(user_id=1, room_id=4, booking_id=others_booking.id)

        assert store.bookings[others_booking.id].room_id == 4
        assert store.bookings[booked_user.id].room_id == 3

    @pytest.mark.asyncio
    async def test_ineligible_user_cannot_change(self, use_case, store):
        store.add_room(room_id=4, capacity=2)
        booking = store.add_booking(user_id=1, room_id=4)

        with pytest.raises(CannotBookError):
            await use_case.change_booking(user_id=1, room_id=4, booking_id=booking.id)
