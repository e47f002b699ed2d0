"""Flights service: flight and airport endpoints."""

from fastapi import APIRouter

from fms.api.crud import crud_router
from fms.api.schemas.flights import AirportRead, AirportWrite, FlightRead, FlightWrite
from fms.services import resources

router = APIRouter()
router.include_router(
    crud_router(
        resources.flights,
        path="flights",
        write_schema=FlightWrite,
        read_schema=FlightRead,
        tags=["Flights"],
    )
)
router.include_router(
    crud_router(
        resources.airports,
        path="airports",
        write_schema=AirportWrite,
        read_schema=AirportRead,
        tags=["Airports"],
    )
)
