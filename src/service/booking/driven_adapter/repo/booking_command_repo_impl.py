from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        db_booking = BookingModel(user_id=user_id, room_id=room_id)
        self.session.add(db_booking)
        await self.session.flush()
        # Load server-side defaults (created_at/updated_at)
        await self.session.refresh(db_booking)

        return BookingCommandRepoImpl._to_entity(db_booking)

    @Logger.io
    async def upsert(self, *, booking_id: int, user_id: int, room_id: int) -> Booking:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id)
        )
        db_booking = result.scalar_one_or_none()

        if db_booking is None:
            return await self.create(user_id=user_id, room_id=room_id)

        db_booking.room_id = room_id
        await self.session.flush()
        await self.session.refresh(db_booking)

        return BookingCommandRepoImpl._to_entity(db_booking)
