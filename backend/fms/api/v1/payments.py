"""Payments service: invoice and payment endpoints."""

from fastapi import APIRouter

from fms.api.crud import crud_router
from fms.api.schemas.payments import InvoiceRead, InvoiceWrite, PaymentRead, PaymentWrite
from fms.services import resources

router = APIRouter()

# GET /invoices?filter=payment-is-null lists unpaid invoices for every caller
router.include_router(
    crud_router(
        resources.invoices,
        path="invoices",
        write_schema=InvoiceWrite,
        read_schema=InvoiceRead,
        tags=["Invoices"],
    )
)
router.include_router(
    crud_router(
        resources.payments,
        path="payments",
        write_schema=PaymentWrite,
        read_schema=PaymentRead,
        tags=["Payments"],
    )
)
