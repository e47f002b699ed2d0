"""
Generic entity store shared by every resource.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fms.db.models import Base

ModelT = TypeVar("ModelT", bound=Base)


async def save(db: AsyncSession, record: ModelT) -> ModelT:
    """
    Insert a new record or overwrite an existing one.

    Records without an id are inserted and get one assigned on flush.
    Records with an id are merged (last write wins). An id that does not
    exist yet is dropped and the record is inserted under a fresh id, so
    the id sequence never falls behind client-chosen ids.
    """
    if record.id is not None and await find_by_id(db, type(record), record.id) is None:
        record.id = None

    if record.id is None:
        db.add(record)
        await db.flush()
        return record

    merged = await db.merge(record)
    await db.flush()
    return merged


async def find_by_id(db: AsyncSession, model: type[ModelT], record_id: int) -> ModelT | None:
    """Fetch a record by primary key."""
    return await db.get(model, record_id)


async def find_all(db: AsyncSession, model: type[ModelT]) -> Sequence[ModelT]:
    """Fetch every record of *model*, oldest id first."""
    result = await db.execute(select(model).order_by(model.id))
    return result.scalars().all()


async def find_all_owned_by(
    db: AsyncSession,
    model: type[ModelT],
    owner_column: str,
    owner: str,
) -> Sequence[ModelT]:
    """Fetch records whose *owner_column* equals *owner*."""
    stmt = select(model).where(getattr(model, owner_column) == owner).order_by(model.id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def delete_by_id(db: AsyncSession, model: type[ModelT], record_id: int) -> bool:
    """Hard-delete a record. Returns True if a row was deleted."""
    record = await find_by_id(db, model, record_id)
    if record is None:
        return False
    await db.delete(record)
    await db.flush()
    return True
