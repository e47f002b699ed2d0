"""API schema package."""

from fms.api.schemas.base import ErrorResponse
from fms.api.schemas.bookings import BookingRead, BookingWrite, LuggageRead, LuggageWrite
from fms.api.schemas.flights import AirportRead, AirportWrite, FlightRead, FlightWrite
from fms.api.schemas.notifications import NotificationRead, NotificationWrite
from fms.api.schemas.passengers import PassengerRead, PassengerWrite
from fms.api.schemas.payments import CreditCard, InvoiceRead, InvoiceWrite, PaymentRead, PaymentWrite

__all__ = [
    "ErrorResponse",
    "AirportRead",
    "AirportWrite",
    "BookingRead",
    "BookingWrite",
    "CreditCard",
    "FlightRead",
    "FlightWrite",
    "InvoiceRead",
    "InvoiceWrite",
    "LuggageRead",
    "LuggageWrite",
    "NotificationRead",
    "NotificationWrite",
    "PassengerRead",
    "PassengerWrite",
    "PaymentRead",
    "PaymentWrite",
]
