"""Booking and luggage request/response schemas."""

from __future__ import annotations

from pydantic import Field

from fms.api.schemas.base import ReadSchema, WriteSchema
from fms.core.constants import LuggageType
from fms.db.models import Booking, Luggage


class BookingWrite(WriteSchema):
    __orm_model__ = Booking

    booking_number: int
    flight_number: str = Field(..., min_length=1, max_length=16)
    passenger_id: str = Field(..., min_length=1, max_length=100)


class BookingRead(ReadSchema):
    booking_number: int
    flight_number: str
    passenger_id: str


class LuggageWrite(WriteSchema):
    __orm_model__ = Luggage

    luggage_type: LuggageType | None = None
    luggage_number: int | None = None
    flight_number: str | None = Field(None, max_length=16)
    booking_number: int | None = None
    passenger_id: str = Field(..., min_length=1, max_length=100)
    weight_category: int | None = Field(None, ge=0)
    rfid_tag: str | None = Field(None, max_length=64)


class LuggageRead(ReadSchema):
    luggage_type: LuggageType | None = None
    luggage_number: int | None = None
    flight_number: str | None = None
    booking_number: int | None = None
    passenger_id: str
    weight_category: int | None = None
    rfid_tag: str | None = None
