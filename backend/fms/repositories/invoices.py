"""Invoice queries beyond the generic store."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from fms.db.models import Invoice, Payment


async def find_without_payment(db: AsyncSession) -> Sequence[Invoice]:
    """Fetch invoices that no payment references yet."""
    paid = exists().where(Payment.invoice_id == Invoice.id)
    result = await db.execute(select(Invoice).where(~paid).order_by(Invoice.id))
    return result.scalars().all()
