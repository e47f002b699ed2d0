"""
One CrudResource per entity type.

Ownership-aware resources (owner_field="passenger_id") only show a
record to the principal whose login equals its ``passenger_id``.
"""

from fms.core.config import settings
from fms.core.constants import EventType, ListFilter
from fms.db.models import Airport, Booking, Flight, Invoice, Luggage, Notification, Passenger, Payment
from fms.repositories import invoices as invoice_repository
from fms.services.crud import CrudResource
from fms.services.events import EventRoute
from fms.services.projections import BookingEvent, FlightEvent, NotificationDocument, PaymentEvent
from fms.services.validation import validate_payment

# ─── payments service ────────────────────────
invoices = CrudResource(
    Invoice,
    "invoice",
    owner_field="passenger_id",
    list_filters={ListFilter.PAYMENT_IS_NULL: invoice_repository.find_without_payment},
)

payments = CrudResource(
    Payment,
    "payment",
    owner_field="passenger_id",
    validator=validate_payment,
    strict_setting="PAYMENT_STRICT_VALIDATION",
    events=EventRoute(
        topics={
            EventType.SET: settings.KAFKA_TOPIC_PAYMENT_SET,
            EventType.UPDATED: settings.KAFKA_TOPIC_PAYMENT_SET,
        },
        project=PaymentEvent.from_record,
    ),
)

# ─── flights service ─────────────────────────
flights = CrudResource(
    Flight,
    "flight",
    events=EventRoute(
        topics={
            EventType.SET: settings.KAFKA_TOPIC_FLIGHT_SET,
            EventType.UPDATED: settings.KAFKA_TOPIC_FLIGHT_UPDATED,
            EventType.CANCELLED: settings.KAFKA_TOPIC_FLIGHT_CANCELLED,
        },
        project=FlightEvent.from_record,
    ),
)

airports = CrudResource(Airport, "airport")

# ─── passengers service ──────────────────────
passengers = CrudResource(Passenger, "passenger")

# ─── bookings service ────────────────────────
bookings = CrudResource(
    Booking,
    "booking",
    owner_field="passenger_id",
    events=EventRoute(
        topics={
            EventType.SET: settings.KAFKA_TOPIC_BOOKING_SET,
            EventType.CANCELLED: settings.KAFKA_TOPIC_BOOKING_CANCELLED,
        },
        project=BookingEvent.from_record,
    ),
)

luggages = CrudResource(Luggage, "luggage", owner_field="passenger_id")

# ─── notifications service ───────────────────
notifications = CrudResource(
    Notification,
    "notification",
    search_document=lambda n: NotificationDocument.from_record(n).to_document(),
)
