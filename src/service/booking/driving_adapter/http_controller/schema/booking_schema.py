from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BookingRoomRequest(BaseModel):
    """Body of POST /booking and PUT /booking/{bookingId}"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={'examples': [{'roomId': 1}]},
    )

    room_id: Optional[int] = Field(default=None, alias='roomId', validate_default=True)

    @field_validator('room_id')
    @classmethod
    def room_id_must_be_set(cls, v: Optional[int]) -> int:
        if not v:
            raise ValueError('roomId is required')
        return v


class RoomResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'room': {
                    'id': 3,
                    'name': '101',
                    'capacity': 2,
                    'hotelId': 1,
                    'createdAt': '2026-01-10T10:30:00Z',
                    'updatedAt': '2026-01-10T10:30:00Z',
                },
            }
        }
    )

    id: int
    room: RoomResponse


class BookingIdResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_id: int
