"""
Tests for the demo seed script.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fms.db.models import Base, Booking, Flight
from scripts.seed_demo import seed_session


@pytest.mark.asyncio
async def test_seed_session_inserts_reference_data():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        counts = await seed_session(session)
        await session.commit()

        flights = (await session.execute(select(func.count()).select_from(Flight))).scalar_one()
        bookings = (await session.execute(select(Booking.passenger_id).order_by(Booking.id))).scalars().all()

    await engine.dispose()

    assert counts == {"airports": 3, "passengers": 2, "flights": 2, "bookings": 2}
    assert flights == 2
    assert bookings == ["ada", "alan"]
