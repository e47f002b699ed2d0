"""Flight and airport request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from fms.api.schemas.base import ReadSchema, WriteSchema
from fms.db.models import Airport, Flight


class FlightWrite(WriteSchema):
    __orm_model__ = Flight

    flight_number: str = Field(..., min_length=1, max_length=16)
    departure_airport: str | None = Field(None, min_length=3, max_length=3)
    arrival_airport: str | None = Field(None, min_length=3, max_length=3)
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    capacity: int | None = Field(None, ge=0)


class FlightRead(ReadSchema):
    flight_number: str
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    capacity: int | None = None


class AirportWrite(WriteSchema):
    __orm_model__ = Airport

    code: str = Field(..., min_length=3, max_length=3)
    name: str | None = None
    city: str | None = None
    country: str | None = None


class AirportRead(ReadSchema):
    code: str
    name: str | None = None
    city: str | None = None
    country: str | None = None
