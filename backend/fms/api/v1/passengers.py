"""Passengers service."""

from fms.api.crud import crud_router
from fms.api.schemas.passengers import PassengerRead, PassengerWrite
from fms.services import resources

router = crud_router(
    resources.passengers,
    path="passengers",
    write_schema=PassengerWrite,
    read_schema=PassengerRead,
    tags=["Passengers"],
)
