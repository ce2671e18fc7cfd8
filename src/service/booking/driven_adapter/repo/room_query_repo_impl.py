from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.booking.domain.entity.room_entity import Room
from src.service.booking.driven_adapter.model.room_model import RoomModel


class RoomQueryRepoImpl(IRoomQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def to_entity(db_room: RoomModel) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
        )

    @staticmethod
    def select_by_id(*, room_id: int, for_update: bool = False) -> Select[tuple[RoomModel]]:
        stmt = select(RoomModel).where(RoomModel.id == room_id)
        if for_update:
            # Rendered as FOR UPDATE on PostgreSQL; dialects without row locks ignore it
            stmt = stmt.with_for_update()
        return stmt

    @Logger.io
    async def get_by_id(self, *, room_id: int, for_update: bool = False) -> Optional[Room]:
        result = await self.session.execute(
            RoomQueryRepoImpl.select_by_id(room_id=room_id, for_update=for_update)
        )
        db_room = result.scalar_one_or_none()

        if not db_room:
            return None

        return RoomQueryRepoImpl.to_entity(db_room)
