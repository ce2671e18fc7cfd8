"""
SQLite-backed fixtures for the SQLAlchemy adapters

Each test gets its own database file, so engines rebuilt on a new event loop
still see the same data.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from pathlib import Path

import attrs
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import (
    AsyncEngineManager,
    Database,
    create_db_and_tables,
)
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.booking.domain.enum import TicketStatus
from src.service.booking.driven_adapter.model import (
    AddressModel,
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)


@attrs.define
class SeededWorld:
    eligible_user_id: int
    other_user_id: int
    remote_user_id: int
    hotel_id: int
    single_room_id: int
    double_room_id: int


@pytest.fixture
async def engine_manager(tmp_path: Path) -> AsyncGenerator[AsyncEngineManager, None]:
    manager = AsyncEngineManager(database_url=f'sqlite+aiosqlite:///{tmp_path / "booking.db"}')
    await create_db_and_tables(engine=manager.get_engine())
    yield manager
    await manager.dispose()


@pytest.fixture
def database(engine_manager: AsyncEngineManager) -> Database:
    return Database(engine_manager=engine_manager)


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as db_session:
        yield db_session


@pytest.fixture
def sqlalchemy_uow(database: Database) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory=database.session)


async def _add_attendee(
    db_session: AsyncSession, *, email: str, ticket_type: TicketTypeModel, status: TicketStatus
) -> int:
    user = UserModel(email=email, hashed_password='!')
    db_session.add(user)
    await db_session.flush()

    enrollment = EnrollmentModel(
        user_id=user.id,
        name=email,
        cpf='000.000.000-00',
        birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
        phone='(21) 99999-9999',
    )
    db_session.add(enrollment)
    await db_session.flush()

    db_session.add_all(
        [
            AddressModel(
                enrollment_id=enrollment.id,
                cep='20000-000',
                street='Rua A',
                city='Rio de Janeiro',
                state='RJ',
                number='10',
                neighborhood='Centro',
            ),
            TicketModel(
                ticket_type_id=ticket_type.id,
                enrollment_id=enrollment.id,
                status=status.value,
            ),
        ]
    )
    await db_session.flush()
    return user.id


@pytest.fixture
async def world(database: Database) -> SeededWorld:
    """Two eligible attendees, one remote attendee, a hotel with a single and a double room"""
    async with database.session() as db_session:
        hotel_type = TicketTypeModel(
            name='In person + hotel', price=600, is_remote=False, includes_hotel=True
        )
        remote_type = TicketTypeModel(
            name='Online', price=100, is_remote=True, includes_hotel=False
        )
        hotel = HotelModel(name='Driven Resort', image='https://example.com/hotel.png')
        db_session.add_all([hotel_type, remote_type, hotel])
        await db_session.flush()

        single_room = RoomModel(name='101', capacity=1, hotel_id=hotel.id)
        double_room = RoomModel(name='102', capacity=2, hotel_id=hotel.id)
        db_session.add_all([single_room, double_room])
        await db_session.flush()

        eligible_user_id = await _add_attendee(
            db_session, email='a@t.com', ticket_type=hotel_type, status=TicketStatus.PAID
        )
        other_user_id = await _add_attendee(
            db_session, email='b@t.com', ticket_type=hotel_type, status=TicketStatus.PAID
        )
        remote_user_id = await _add_attendee(
            db_session, email='c@t.com', ticket_type=remote_type, status=TicketStatus.PAID
        )
        await db_session.commit()

        return SeededWorld(
            eligible_user_id=eligible_user_id,
            other_user_id=other_user_id,
            remote_user_id=remote_user_id,
            hotel_id=hotel.id,
            single_room_id=single_room.id,
            double_room_id=double_room.id,
        )
