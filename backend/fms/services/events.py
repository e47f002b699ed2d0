"""
Kafka side-effect emitter.

Publishing is fire-and-forget and at-most-once: the store write is already
done when an event is produced, so serialization errors, broker errors and
failed deliveries are logged and never reach the HTTP caller. Nothing is
retried.

One EventPublisher is created per process in the application lifespan::

    publisher = EventPublisher.from_settings()
    await publisher.start()
    ...
    await publisher.stop()
"""

from __future__ import annotations

import asyncio
import functools
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from aiokafka import AIOKafkaProducer
from pydantic import BaseModel

from fms.core.config import settings
from fms.core.constants import EventType
from fms.core.logging import get_logger

logger = get_logger(__name__)


class EventPublisher:
    """Thin wrapper around AIOKafkaProducer that never raises on publish."""

    def __init__(self, producer: AIOKafkaProducer | None = None) -> None:
        self._producer = producer
        self._started = False

    @classmethod
    def from_settings(cls) -> "EventPublisher":
        """Build a publisher, or a disabled one when KAFKA_ENABLED is false."""
        if not settings.KAFKA_ENABLED or not settings.KAFKA_BROKERS:
            logger.info("Kafka publishing disabled")
            return cls(None)
        producer = AIOKafkaProducer(
            bootstrap_servers=settings.KAFKA_BROKERS,
            client_id=settings.KAFKA_CLIENT_ID,
        )
        return cls(producer)

    @property
    def enabled(self) -> bool:
        return self._producer is not None and self._started

    async def start(self) -> None:
        """Connect the producer. A broker that is down leaves the publisher disabled."""
        if self._producer is None:
            return
        try:
            await self._producer.start()
            self._started = True
            logger.info("Kafka producer started", brokers=settings.KAFKA_BROKERS)
        except Exception as exc:
            logger.error("Kafka producer failed to start (events will be dropped)", error=str(exc))

    async def stop(self) -> None:
        if self._producer is None or not self._started:
            return
        logger.info("Kafka producer shutting down")
        await self._producer.stop()
        self._started = False

    async def publish(self, topic: str, payload: str) -> bool:
        """
        Hand *payload* to the producer for *topic*.

        Returns True when the message was queued; delivery itself is not
        awaited. Returns False (after logging) on any failure.
        """
        if not self.enabled:
            logger.debug("Kafka disabled, event dropped", topic=topic)
            return False
        try:
            delivery = await self._producer.send(topic, value=payload.encode("utf-8"))
        except Exception as exc:
            logger.error("Failed to publish event (non-fatal)", topic=topic, error=str(exc))
            return False

        delivery.add_done_callback(functools.partial(_log_delivery, topic))
        logger.debug("Produced an event", topic=topic, payload=payload)
        return True


def _log_delivery(topic: str, delivery: asyncio.Future) -> None:
    if delivery.cancelled():
        logger.warning("Event delivery cancelled", topic=topic)
        return
    exc = delivery.exception()
    if exc is not None:
        logger.error("Event delivery failed (non-fatal)", topic=topic, error=str(exc))


@dataclass(frozen=True)
class EventRoute:
    """
    Which topic each lifecycle transition of a resource goes to, and how
    the record is reduced to an event payload.

    Transitions missing from *topics* publish nothing.
    """

    topics: Mapping[EventType, str]
    project: Callable[[Any, EventType], BaseModel]

    async def emit(self, publisher: EventPublisher, record: Any, event_type: EventType) -> bool:
        topic = self.topics.get(event_type)
        if topic is None:
            return False
        try:
            payload = self.project(record, event_type).model_dump_json(by_alias=True)
        except Exception as exc:
            logger.error(
                "Failed to serialize event (non-fatal)",
                topic=topic,
                event_type=str(event_type),
                record_id=getattr(record, "id", None),
                error=str(exc),
            )
            return False
        return await publisher.publish(topic, payload)
