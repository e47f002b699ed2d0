"""Shared constants and enums used across the services."""

from enum import StrEnum


class ServiceName(StrEnum):
    """Deployable services; each mounts its own resource routers."""

    PAYMENTS = "payments"
    FLIGHTS = "flights"
    PASSENGERS = "passengers"
    BOOKINGS = "bookings"
    NOTIFICATIONS = "notifications"
    ALL = "all"


class EventType(StrEnum):
    """Lifecycle transition carried by a published event."""

    SET = "SET"
    UPDATED = "UPDATED"
    CANCELLED = "CANCELLED"


class ListFilter(StrEnum):
    """Named list filters accepted by ``GET /{resource}s?filter=``."""

    PAYMENT_IS_NULL = "payment-is-null"


class LuggageType(StrEnum):
    """Kinds of luggage a passenger can register."""

    HAND = "HAND"
    CHECKED = "CHECKED"
    SPECIAL = "SPECIAL"


class NotificationType(StrEnum):
    """Passenger notification categories."""

    INFO = "INFO"
    DELAY = "DELAY"
    CANCELLATION = "CANCELLATION"
    GATE_CHANGE = "GATE_CHANGE"
    BOARDING = "BOARDING"


class ErrorKey(StrEnum):
    """Machine-readable keys sent in the ``X-<app>-error`` header."""

    ID_EXISTS = "idexists"
    ID_NULL = "idnull"
    NOT_FOUND = "notfound"
