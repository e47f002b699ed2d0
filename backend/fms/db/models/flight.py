"""Flight: a scheduled flight between two airports."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin


class Flight(IdMixin, Base):
    __tablename__ = "flights"

    flight_number: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    departure_airport: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    arrival_airport: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    departure_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    arrival_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Flight id={self.id} {self.flight_number} {self.departure_airport}->{self.arrival_airport}>"
