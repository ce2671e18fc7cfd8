#!/usr/bin/env python3
"""
Database Seed Script
Populate a hotel with rooms and one booking-eligible attendee

Prints a bearer token for the attendee so the /booking endpoints can be called right away.
"""

import asyncio
from datetime import datetime, timezone

from src.platform.database.orm_db_setting import Database, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.enum.ticket_status import TicketStatus
from src.service.booking.driven_adapter.model import (
    AddressModel,
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# (room name, capacity)
ROOMS = [('101', 1), ('102', 2), ('103', 3)]


async def seed() -> None:
    database = Database()

    async with database.session() as session:
        hotel = HotelModel(name='Driven Resort', image='https://example.com/hotel.png')
        session.add(hotel)
        await session.flush()

        for name, capacity in ROOMS:
            session.add(RoomModel(name=name, capacity=capacity, hotel_id=hotel.id))

        user = UserModel(email='attendee@t.com', hashed_password='!')
        ticket_type = TicketTypeModel(
            name='In person + hotel', price=600, is_remote=False, includes_hotel=True
        )
        session.add_all([user, ticket_type])
        await session.flush()

        enrollment = EnrollmentModel(
            user_id=user.id,
            name='Seed Attendee',
            cpf='000.000.000-00',
            birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
            phone='(21) 99999-9999',
        )
        session.add(enrollment)
        await session.flush()

        session.add_all(
            [
                AddressModel(
                    enrollment_id=enrollment.id,
                    cep='20000-000',
                    street='Rua Seed',
                    city='Rio de Janeiro',
                    state='RJ',
                    number='1',
                    neighborhood='Centro',
                ),
                TicketModel(
                    ticket_type_id=ticket_type.id,
                    enrollment_id=enrollment.id,
                    status=TicketStatus.PAID.value,
                ),
            ]
        )
        await session.commit()

        Logger.base.info(f'🏨 Seeded hotel {hotel.id} with {len(ROOMS)} rooms')
        Logger.base.info(f'👤 Seeded user {user.id} ({user.email})')
        Logger.base.info(f'🔑 Bearer token: {JwtAuth().create_jwt_token(user_id=user.id)}')

    await dispose_engine()


if __name__ == '__main__':
    asyncio.run(seed())
