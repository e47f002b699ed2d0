"""
Payment: a passenger's payment for a booking.

The credit card is embedded: its three fields live as ``card_*`` columns
on the payments table rather than in a table of their own.
"""

from datetime import date
from typing import Optional

from sqlalchemy import JSON, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fms.db.models.base import Base, IdMixin, IdType


class Payment(IdMixin, Base):
    __tablename__ = "payments"

    booking_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    to_pay: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    passenger_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # ── Embedded credit card ─────────────────
    card_number: Mapped[Optional[int]] = mapped_column(IdType, nullable=True)
    card_validity_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    card_cvc: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    invoice_id: Mapped[Optional[int]] = mapped_column(
        IdType, ForeignKey("invoices.id", ondelete="SET NULL"), unique=True, nullable=True
    )

    # Outcome of the best-effort checks run on the last save
    validation_errors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Payment id={self.id} booking={self.booking_number} to_pay={self.to_pay}>"
