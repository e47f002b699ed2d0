"""Passenger request/response schemas."""

from __future__ import annotations

from pydantic import Field

from fms.api.schemas.base import ReadSchema, WriteSchema
from fms.db.models import Passenger


class PassengerWrite(WriteSchema):
    __orm_model__ = Passenger

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=50)
    login: str | None = Field(None, max_length=100)


class PassengerRead(ReadSchema):
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    login: str | None = None
