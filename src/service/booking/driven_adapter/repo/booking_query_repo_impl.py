from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model.booking_model import BookingModel
from src.service.booking.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            room=RoomQueryRepoImpl.to_entity(db_booking.room),
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .options(selectinload(BookingModel.room))
            .where(BookingModel.user_id == user_id)
            .order_by(BookingModel.id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        db_booking = result.scalar_one_or_none()

        if not db_booking:
            return None

        return BookingQueryRepoImpl._to_entity(db_booking)

    @Logger.io
    async def list_by_room_id(self, *, room_id: int) -> List[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .options(selectinload(BookingModel.room))
            .where(BookingModel.room_id == room_id)
            .order_by(BookingModel.id)
            .execution_options(populate_existing=True)
        )
        return [BookingQueryRepoImpl._to_entity(db_booking) for db_booking in result.scalars()]
