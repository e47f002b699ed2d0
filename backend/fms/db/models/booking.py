"""Booking: a passenger's seat on a flight."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin


class Booking(IdMixin, Base):
    __tablename__ = "bookings"

    booking_number: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    flight_number: Mapped[str] = mapped_column(String(16), nullable=False)
    passenger_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Booking id={self.id} number={self.booking_number} flight={self.flight_number}>"
