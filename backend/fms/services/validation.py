"""
Best-effort domain validation.

Validators never raise: they return a ValidationOutcome that the resource
attaches to the saved record, logs, and (only in strict mode) turns into
a 400.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fms.db.models import Payment


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one record."""

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls()


def validate_payment(payment: Payment, today: date | None = None) -> ValidationOutcome:
    """Check the amount and the embedded credit card of a payment."""
    today = today or date.today()
    errors: list[str] = []

    if payment.to_pay is None or payment.to_pay < 0:
        errors.append("Invalid amount to pay")

    card = (payment.card_number, payment.card_validity_date, payment.card_cvc)
    if all(value is None for value in card):
        errors.append("Credit card is missing")
        return ValidationOutcome(tuple(errors))

    if payment.card_number is None or payment.card_number < 0:
        errors.append("Credit card number is not correct")
    if payment.card_cvc is None or payment.card_cvc < 0:
        errors.append("Credit card CVC is not correct")
    if payment.card_validity_date is None or payment.card_validity_date < today:
        errors.append("Credit card is expired")

    return ValidationOutcome(tuple(errors))
