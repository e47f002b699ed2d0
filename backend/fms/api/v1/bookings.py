"""Bookings service: booking and luggage endpoints."""

from fastapi import APIRouter

from fms.api.crud import crud_router
from fms.api.schemas.bookings import BookingRead, BookingWrite, LuggageRead, LuggageWrite
from fms.services import resources

router = APIRouter()
router.include_router(
    crud_router(
        resources.bookings,
        path="bookings",
        write_schema=BookingWrite,
        read_schema=BookingRead,
        tags=["Bookings"],
    )
)
router.include_router(
    crud_router(
        resources.luggages,
        path="luggages",
        write_schema=LuggageWrite,
        read_schema=LuggageRead,
        tags=["Luggage"],
    )
)
