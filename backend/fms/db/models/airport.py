"""Airport: reference data for the flights service."""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin


class Airport(IdMixin, Base):
    __tablename__ = "airports"

    code: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Airport id={self.id} {self.code}>"
