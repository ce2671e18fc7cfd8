from pydantic import ValidationError
import pytest

from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingRoomRequest,
    RoomResponse,
)


@pytest.mark.unit
class TestBookingRoomRequest:
    def test_reads_camel_case_room_id(self):
        request = BookingRoomRequest.model_validate({'roomId': 3})

        assert request.room_id == 3

    @pytest.mark.parametrize('payload', [{}, {'roomId': 0}, {'roomId': None}])
    def test_missing_or_zero_room_id_is_rejected(self, payload):
        with pytest.raises(ValidationError, match='roomId is required'):
            BookingRoomRequest.model_validate(payload)


@pytest.mark.unit
class TestResponses:
    def test_booking_id_response_dumps_camel_case(self):
        assert BookingIdResponse(booking_id=5).model_dump(by_alias=True) == {'bookingId': 5}

    def test_room_response_dumps_camel_case(self):
        room = RoomResponse(id=1, name='101', capacity=2, hotel_id=7)

        assert room.model_dump(by_alias=True) == {
            'id': 1,
            'name': '101',
            'capacity': 2,
            'hotelId': 7,
            'createdAt': None,
            'updatedAt': None,
        }
