"""
Invoice: amount owed by a passenger for a booking.

Payments reference invoices through ``payments.invoice_id``; an invoice
without a referencing payment is still open.
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin


class Invoice(IdMixin, Base):
    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(String(64), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    passenger_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    booking_number: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Invoice id={self.id} number={self.invoice_number} passenger={self.passenger_id}>"
