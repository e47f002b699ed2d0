"""
Seed demo reference data for development.
Run: python -m scripts.seed_demo  (from backend/)
"""

import asyncio
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from fms.db.models import Airport, Booking, Flight, Passenger
from fms.db.session import async_session, create_tables
from fms.repositories import base as store

SEED_AIRPORTS = [
    {"code": "ZRH", "name": "Zurich Airport", "city": "Zurich", "country": "Switzerland"},
    {"code": "GVA", "name": "Geneva Airport", "city": "Geneva", "country": "Switzerland"},
    {"code": "LHR", "name": "Heathrow Airport", "city": "London", "country": "United Kingdom"},
]

SEED_PASSENGERS = [
    {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "login": "ada"},
    {"first_name": "Alan", "last_name": "Turing", "email": "alan@example.com", "login": "alan"},
]


def _seed_flights() -> list[dict]:
    tomorrow = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0) + timedelta(days=1)
    return [
        {
            "flight_number": "LX318",
            "departure_airport": "ZRH",
            "arrival_airport": "LHR",
            "departure_time": tomorrow,
            "arrival_time": tomorrow + timedelta(hours=1, minutes=45),
            "capacity": 180,
        },
        {
            "flight_number": "LX2812",
            "departure_airport": "GVA",
            "arrival_airport": "ZRH",
            "departure_time": tomorrow + timedelta(hours=3),
            "arrival_time": tomorrow + timedelta(hours=3, minutes=55),
            "capacity": 110,
        },
    ]


SEED_BOOKINGS = [
    {"booking_number": 1001, "flight_number": "LX318", "passenger_id": "ada"},
    {"booking_number": 1002, "flight_number": "LX2812", "passenger_id": "alan"},
]


async def seed_session(session: AsyncSession) -> dict[str, int]:
    """Insert every seed record through the store; returns counts per entity."""
    counts: dict[str, int] = {}
    for model, rows in (
        (Airport, SEED_AIRPORTS),
        (Passenger, SEED_PASSENGERS),
        (Flight, _seed_flights()),
        (Booking, SEED_BOOKINGS),
    ):
        for data in rows:
            await store.save(session, model(**data))
        counts[model.__tablename__] = len(rows)
    return counts


async def seed():
    """Create tables if needed and insert the demo data."""
    await create_tables()
    async with async_session() as session:
        counts = await seed_session(session)
        await session.commit()
    for table, count in counts.items():
        print(f"  Seeded {count} {table}")


if __name__ == "__main__":
    asyncio.run(seed())
