"""
Models package: re-exports Base and all models.

Import models here so `Base.metadata.create_all` picks up every table.

When adding a new model:
    1. Create `fms/db/models/<table_name>.py`
    2. Import it here
"""

from fms.db.models.base import Base
from fms.db.models.airport import Airport
from fms.db.models.booking import Booking
from fms.db.models.flight import Flight
from fms.db.models.invoice import Invoice
from fms.db.models.luggage import Luggage
from fms.db.models.notification import Notification
from fms.db.models.passenger import Passenger
from fms.db.models.payment import Payment

__all__ = [
    "Base",
    "Airport",
    "Booking",
    "Flight",
    "Invoice",
    "Luggage",
    "Notification",
    "Passenger",
    "Payment",
]
