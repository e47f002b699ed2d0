"""
Generic CRUD-with-ownership-and-side-effects template.

One CrudResource instance per entity type (see resources.py). The
resource owns the rules every REST resource shares:

    create   reject a pre-set id, validate, save, mirror, publish SET
    update   reject a missing id, validate, upsert, mirror, publish UPDATED
    list     all records, or only the caller's for ownership-aware resources
    get      404 when missing or not owned by the caller
    delete   same gate as get, then remove, unmirror, publish CANCELLED

The caller's login is passed in explicitly on every call. Side effects
(Kafka, Elasticsearch) run after the store write and can never fail the
request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from fms.core.config import settings
from fms.core.constants import EventType
from fms.core.errors import ConflictError, NotFoundError, ValidationError
from fms.core.logging import get_logger
from fms.repositories import base as store
from fms.repositories.base import ModelT
from fms.services.events import EventPublisher, EventRoute
from fms.services.ownership import owns
from fms.services.search import SearchMirror
from fms.services.validation import ValidationOutcome

logger = get_logger(__name__)

ListQuery = Callable[[AsyncSession], Awaitable[Sequence[Any]]]


@dataclass
class SideEffects:
    """Process-wide side-effect clients handed to every resource call."""

    publisher: EventPublisher
    search: SearchMirror


class CrudResource(Generic[ModelT]):
    """
    CRUD handler for one entity type.

    Args:
        model: ORM model class.
        entity_name: Name used in errors, logs and alert headers.
        owner_field: Model attribute holding the owner's login. None means
            every caller sees every record.
        validator: Best-effort check run before each save; its outcome is
            attached to the record (``validation_errors``) and logged.
        strict_setting: Name of a boolean setting that, when true, turns a
            failed validation into a 400 instead of saving anyway.
        events: Kafka topics and payload projection for this entity.
        search_document: Builds the document mirrored into the search
            index. None means the entity is not mirrored.
        list_filters: Named list queries selectable with ``?filter=``;
            they replace the ownership filter for that call.
    """

    def __init__(
        self,
        model: type[ModelT],
        entity_name: str,
        *,
        owner_field: str | None = None,
        validator: Callable[[ModelT], ValidationOutcome] | None = None,
        strict_setting: str | None = None,
        events: EventRoute | None = None,
        search_document: Callable[[ModelT], dict[str, Any]] | None = None,
        list_filters: Mapping[str, ListQuery] | None = None,
    ) -> None:
        self.model = model
        self.entity_name = entity_name
        self.owner_field = owner_field
        self.validator = validator
        self.strict_setting = strict_setting
        self.events = events
        self.search_document = search_document
        self.list_filters = dict(list_filters or {})

    @property
    def ownership_aware(self) -> bool:
        return self.owner_field is not None

    def visible_to(self, record: ModelT, principal: str | None) -> bool:
        if not self.ownership_aware:
            return True
        return owns(principal, getattr(record, self.owner_field))

    # ─── Operations ──────────────────────────────────────────
    async def create(
        self,
        db: AsyncSession,
        record: ModelT,
        *,
        principal: str | None,
        effects: SideEffects,
    ) -> ModelT:
        logger.debug("Request to save", entity=self.entity_name, principal=principal)
        if record.id is not None:
            raise ConflictError(self.entity_name)

        self._validate(record)
        saved = await store.save(db, record)
        logger.info("Record created", entity=self.entity_name, record_id=saved.id)

        await self._after_write(saved, EventType.SET, effects)
        return saved

    async def update(
        self,
        db: AsyncSession,
        record: ModelT,
        *,
        principal: str | None,
        effects: SideEffects,
    ) -> ModelT:
        logger.debug("Request to update", entity=self.entity_name, record_id=record.id, principal=principal)
        if record.id is None:
            raise ValidationError.missing_id(self.entity_name)

        self._validate(record)
        saved = await store.save(db, record)
        logger.info("Record updated", entity=self.entity_name, record_id=saved.id)

        await self._after_write(saved, EventType.UPDATED, effects)
        return saved

    async def list(
        self,
        db: AsyncSession,
        *,
        principal: str | None,
        filter_name: str | None = None,
    ) -> list[ModelT]:
        query = self.list_filters.get(filter_name) if filter_name else None
        if query is not None:
            logger.debug("Request to list with filter", entity=self.entity_name, filter=filter_name)
            return list(await query(db))

        logger.debug("Request to list", entity=self.entity_name, principal=principal)
        if not self.ownership_aware:
            return list(await store.find_all(db, self.model))
        if not principal:
            return []
        return list(await store.find_all_owned_by(db, self.model, self.owner_field, principal))

    async def get(
        self,
        db: AsyncSession,
        record_id: int,
        *,
        principal: str | None,
    ) -> ModelT:
        logger.debug("Request to get", entity=self.entity_name, record_id=record_id, principal=principal)
        record = await store.find_by_id(db, self.model, record_id)
        # Not owned and not present look the same to the caller
        if record is None or not self.visible_to(record, principal):
            raise NotFoundError(self.entity_name, record_id)
        return record

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
        *,
        principal: str | None,
        effects: SideEffects,
    ) -> ModelT:
        logger.debug("Request to delete", entity=self.entity_name, record_id=record_id, principal=principal)
        record = await self.get(db, record_id, principal=principal)
        await store.delete_by_id(db, self.model, record_id)
        logger.info("Record deleted", entity=self.entity_name, record_id=record_id)

        if self.search_document is not None:
            await effects.search.delete(record_id)
        if self.events is not None:
            await self.events.emit(effects.publisher, record, EventType.CANCELLED)
        return record

    # ─── Helpers ─────────────────────────────────────────────
    def _validate(self, record: ModelT) -> None:
        if self.validator is None:
            return

        outcome = self.validator(record)
        if hasattr(record, "validation_errors"):
            record.validation_errors = list(outcome.errors)
        if outcome.valid:
            return

        if self.strict_setting and getattr(settings, self.strict_setting, False):
            raise ValidationError(
                "; ".join(outcome.errors),
                entity_name=self.entity_name,
                error_key=f"invalid{self.entity_name}",
                details={"errors": list(outcome.errors)},
            )
        logger.error(
            "Validation failed, saving anyway",
            entity=self.entity_name,
            record_id=record.id,
            errors=list(outcome.errors),
        )

    async def _after_write(self, record: ModelT, event_type: EventType, effects: SideEffects) -> None:
        if self.search_document is not None:
            try:
                document = self.search_document(record)
            except Exception as exc:
                logger.error(
                    "Failed to build search document (non-fatal)",
                    entity=self.entity_name,
                    record_id=record.id,
                    error=str(exc),
                )
            else:
                await effects.search.index(record.id, document)
        if self.events is not None:
            await self.events.emit(effects.publisher, record, event_type)
