"""Invoice and payment request/response schemas."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from fms.api.schemas.base import CamelModel, ReadSchema, WriteSchema
from fms.db.models import Invoice, Payment


class InvoiceWrite(WriteSchema):
    __orm_model__ = Invoice

    invoice_number: str = Field(..., min_length=1, max_length=64)
    amount: float
    passenger_id: str = Field(..., min_length=1, max_length=100)
    booking_number: int


class InvoiceRead(ReadSchema):
    invoice_number: str
    amount: float
    passenger_id: str
    booking_number: int


class CreditCard(CamelModel):
    """Credit card embedded in a payment."""

    card_number: int | None = None
    validity_date: date | None = None
    cvc: int | None = None


class PaymentWrite(WriteSchema):
    __orm_model__ = Payment

    booking_number: int | None = None
    to_pay: float | None = None
    passenger_id: str = Field(..., min_length=1, max_length=100)
    credit_card: CreditCard | None = None
    invoice_id: int | None = None

    def to_model(self) -> Payment:
        card = self.credit_card or CreditCard()
        return Payment(
            id=self.id,
            booking_number=self.booking_number,
            to_pay=self.to_pay,
            passenger_id=self.passenger_id,
            card_number=card.card_number,
            card_validity_date=card.validity_date,
            card_cvc=card.cvc,
            invoice_id=self.invoice_id,
        )


class PaymentRead(ReadSchema):
    booking_number: int | None = None
    to_pay: float | None = None
    passenger_id: str
    credit_card: CreditCard | None = None
    invoice_id: int | None = None
    validation_errors: list[str] = []

    @classmethod
    def from_model(cls, payment: Payment) -> "PaymentRead":
        card = None
        if any(v is not None for v in (payment.card_number, payment.card_validity_date, payment.card_cvc)):
            card = CreditCard(
                card_number=payment.card_number,
                validity_date=payment.card_validity_date,
                cvc=payment.card_cvc,
            )
        return cls(
            id=payment.id,
            booking_number=payment.booking_number,
            to_pay=payment.to_pay,
            passenger_id=payment.passenger_id,
            credit_card=card,
            invoice_id=payment.invoice_id,
            validation_errors=list(payment.validation_errors or []),
        )
