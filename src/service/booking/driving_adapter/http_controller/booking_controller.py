from fastapi import APIRouter, Depends, Path, status
from opentelemetry import trace

from src.platform.exception.exceptions import CannotBookError, DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.change_booking_use_case import ChangeBookingUseCase
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingResponse,
    BookingRoomRequest,
    RoomResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.get_booking') as span:
        span.set_attribute('user_id', user_id)

        try:
            with metrics.track_request(operation='get'):
                booking = await use_case.get_booking(user_id=user_id)
        except NotFoundError:
            raise
        except Exception as e:
            # Ineligible users and unexpected failures alike read as "no booking"
            raise NotFoundError('Booking not found') from e

        if booking.room is None:
            raise NotFoundError('Booking not found')

        span.set_attribute('booking.id', booking.id)
        return BookingResponse(
            id=booking.id,
            room=RoomResponse(
                id=booking.room.id,
                name=booking.room.name,
                capacity=booking.room.capacity,
                hotel_id=booking.room.hotel_id,
                created_at=booking.room.created_at,
                updated_at=booking.room.updated_at,
            ),
        )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('room_id', request.room_id or 0)

        try:
            with metrics.track_request(operation='create'):
                booking = await use_case.create_booking(
                    user_id=user_id, room_id=request.room_id or 0
                )
        except (CannotBookError, NotFoundError):
            raise
        except Exception as e:
            raise NotFoundError('Booking could not be created') from e

        span.set_attribute('booking.id', booking.id)
        return BookingIdResponse(booking_id=booking.id)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def change_booking(
    request: BookingRoomRequest,
    booking_id: int = Path(),
    user_id: int = Depends(get_current_user_id),
    use_case: ChangeBookingUseCase = Depends(ChangeBookingUseCase.depends),
) -> BookingIdResponse:
    if not booking_id:
        raise DomainError('bookingId is required')

    with tracer.start_as_current_span('controller.change_booking') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('booking_id', booking_id)
        span.set_attribute('room_id', request.room_id or 0)

        try:
            with metrics.track_request(operation='change'):
                booking = await use_case.change_booking(
                    user_id=user_id, room_id=request.room_id or 0, booking_id=booking_id
                )
        except (CannotBookError, NotFoundError):
            raise
        except Exception as e:
            raise NotFoundError('Booking could not be changed') from e

        return BookingIdResponse(booking_id=booking.id)
