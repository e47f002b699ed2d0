"""
Event payloads published to Kafka, and the notification search document.

Each event payload is a deliberately small view of the record: consumers get
enough to correlate (ids, business numbers) and fetch the rest over REST.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fms.core.constants import EventType
from fms.db.models import Booking, Flight, Notification, Payment


class EventPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _str(value: object) -> str | None:
    return None if value is None else str(value)


class PaymentEvent(EventPayload):
    """Published on ``payment_set``; every field is a string."""

    id: str
    booking_number: str | None
    to_pay: str | None

    @classmethod
    def from_record(cls, payment: Payment, event_type: EventType) -> "PaymentEvent":
        return cls(
            id=str(payment.id),
            booking_number=_str(payment.booking_number),
            to_pay=_str(payment.to_pay),
        )


class FlightEvent(EventPayload):
    id: int
    flight_number: str
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_time: str | None = None
    event_type: EventType

    @classmethod
    def from_record(cls, flight: Flight, event_type: EventType) -> "FlightEvent":
        return cls(
            id=flight.id,
            flight_number=flight.flight_number,
            departure_airport=flight.departure_airport,
            arrival_airport=flight.arrival_airport,
            departure_time=flight.departure_time.isoformat() if flight.departure_time else None,
            event_type=event_type,
        )


class BookingEvent(EventPayload):
    id: int
    booking_number: int
    flight_number: str
    passenger_id: str
    event_type: EventType

    @classmethod
    def from_record(cls, booking: Booking, event_type: EventType) -> "BookingEvent":
        return cls(
            id=booking.id,
            booking_number=booking.booking_number,
            flight_number=booking.flight_number,
            passenger_id=booking.passenger_id,
            event_type=event_type,
        )


class NotificationDocument(EventPayload):
    """Search-index copy of a notification; same shape as the REST view."""

    id: int
    passenger_id: str | None = None
    title: str
    message: str | None = None
    notification_type: str
    created_at: str | None = None

    @classmethod
    def from_record(cls, notification: Notification) -> "NotificationDocument":
        return cls(
            id=notification.id,
            passenger_id=notification.passenger_id,
            title=notification.title,
            message=notification.message,
            notification_type=str(notification.notification_type),
            created_at=notification.created_at.isoformat() if notification.created_at else None,
        )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
