"""
Unit of Work Pattern - one database session and transaction per use case call

Architecture:
- UoW owns the session lifecycle (opened on enter, closed on exit)
- UoW owns commit/rollback; leaving the block without commit rolls back
- Repositories receive the shared session from the UoW
- Use cases coordinate repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncContextManager, Callable, Self

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
    from src.service.booking.app.interface.i_room_query_repo import IRoomQueryRepo
    from src.service.booking.app.interface.i_ticket_query_repo import ITicketQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Booking Service

    Usage:
        async with uow:
            room = await uow.room_query_repo.get_by_id(room_id=room_id, for_update=True)
            booking = await uow.booking_command_repo.create(user_id=user_id, room_id=room_id)
            await uow.commit()
    """

    # Upstream (read-only) repositories
    enrollment_query_repo: IEnrollmentQueryRepo
    ticket_query_repo: ITicketQueryRepo
    room_query_repo: IRoomQueryRepo

    # Booking repositories
    booking_query_repo: IBookingQueryRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    session_factory is called once per `async with` block, so a single instance
    must not be entered concurrently; the DI container hands out a new one per request.
    """

    def __init__(self, session_factory: Callable[[], AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self._exit_stack: AsyncExitStack | None = None
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        from src.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.enrollment_query_repo_impl import (
            EnrollmentQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.room_query_repo_impl import (
            RoomQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Create repositories with shared session
        self.enrollment_query_repo = EnrollmentQueryRepoImpl(session=self.session)
        self.ticket_query_repo = TicketQueryRepoImpl(session=self.session)
        self.room_query_repo = RoomQueryRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside of its `async with` block')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
