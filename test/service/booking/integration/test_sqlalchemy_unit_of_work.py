"""
Integration tests for SqlAlchemyUnitOfWork and the booking use cases on SQLite
"""

import pytest
from sqlalchemy import update

from src.platform.exception.exceptions import CannotBookError
from src.service.booking.app.command.change_booking_use_case import ChangeBookingUseCase
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.query.booking_eligibility_checker import BookingEligibilityChecker
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.driven_adapter.model import TicketModel
from src.service.booking.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl


@pytest.mark.integration
class TestSqlAlchemyUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_persists(self, sqlalchemy_uow, database, world):
        async with sqlalchemy_uow:
            await sqlalchemy_uow.booking_command_repo.create(
                user_id=world.eligible_user_id, room_id=world.double_room_id
            )
            await sqlalchemy_uow.commit()

        async with database.session() as session:
            booking = await BookingQueryRepoImpl(session=session).get_by_user_id(
                user_id=world.eligible_user_id
            )
        assert booking is not None

    @pytest.mark.asyncio
    async def test_leaving_without_commit_rolls_back(self, sqlalchemy_uow, database, world):
        async with sqlalchemy_uow:
            await sqlalchemy_uow.booking_command_repo.create(
                user_id=world.eligible_user_id, room_id=world.double_room_id
            )

        async with database.session() as session:
            booking = await BookingQueryRepoImpl(session=session).get_by_user_id(
                user_id=world.eligible_user_id
            )
        assert booking is None

    @pytest.mark.asyncio
    async def test_commit_outside_block_fails(self, sqlalchemy_uow):
        with pytest.raises(RuntimeError):
            await sqlalchemy_uow.commit()


@pytest.mark.integration
class TestBookingFlowOnDatabase:
    @pytest.fixture
    def checker(self):
        return BookingEligibilityChecker()

    @pytest.mark.asyncio
    async def test_create_get_and_change(self, sqlalchemy_uow, checker, world):
        create = CreateBookingUseCase(uow=sqlalchemy_uow, eligibility_checker=checker)
        get = GetBookingUseCase(uow=sqlalchemy_uow, eligibility_checker=checker)
        change = ChangeBookingUseCase(uow=sqlalchemy_uow, eligibility_checker=checker)

        created = await create.create_booking(
            user_id=world.eligible_user_id, room_id=world.double_room_id
        )
        fetched = await get.get_booking(user_id=world.eligible_user_id)
        assert fetched.id == created.id
        assert fetched.room is not None
        assert fetched.room.id == world.double_room_id

        changed = await change.change_booking(
            user_id=world.eligible_user_id, room_id=world.single_room_id, booking_id=created.id
        )
        assert changed.id == created.id

        fetched = await get.get_booking(user_id=world.eligible_user_id)
        assert fetched.room is not None
        assert fetched.room.id == world.single_room_id

    @pytest.mark.asyncio
    async def test_single_room_fills_up(self, sqlalchemy_uow, checker, world):
        create = CreateBookingUseCase(uow=sqlalchemy_uow, eligibility_checker=checker)

        await create.create_booking(user_id=world.eligible_user_id, room_id=world.single_room_id)

        with pytest.raises(CannotBookError):
            await create.create_booking(user_id=world.other_user_id, room_id=world.single_room_id)

    @pytest.mark.asyncio
    async def test_remote_attendee_cannot_book(self, sqlalchemy_uow, checker, world):
        create = CreateBookingUseCase(uow=sqlalchemy_uow, eligibility_checker=checker)

        with pytest.raises(CannotBookError):
            await create.create_booking(user_id=world.remote_user_id, room_id=world.double_room_id)

    @pytest.mark.asyncio
    async def test_unlisted_non_reserved_status_can_book(
        self, sqlalchemy_uow, checker, database, world
    ):
        # Given: tickets moved to a status this service does not enumerate
        async with database.session() as session:
            await session.execute(update(TicketModel).values(status='USED'))
            await session.commit()

        # When
        booking = await CreateBookingUseCase(
            uow=sqlalchemy_uow, eligibility_checker=checker
        ).create_booking(user_id=world.eligible_user_id, room_id=world.double_room_id)

        # Then
        assert booking.user_id == world.eligible_user_id
        assert booking.room_id == world.double_room_id
