"""Luggage: an item registered against a booking."""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin


class Luggage(IdMixin, Base):
    __tablename__ = "luggages"

    luggage_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # HAND | CHECKED | SPECIAL
    luggage_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    flight_number: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    booking_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    passenger_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    weight_category: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    rfid_tag: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Luggage id={self.id} type={self.luggage_type} booking={self.booking_number}>"
