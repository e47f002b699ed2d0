"""
Structured logging configuration using structlog.

Call ``setup_logging()`` once at startup; everything else asks for a
logger with ``get_logger(__name__)`` and logs key-value context::

    logger = get_logger(__name__)
    logger.info("Payment saved", payment_id=42)
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from fms.core.config import settings


def add_service_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every entry with the application and service names."""
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("service", settings.SERVICE_NAME)
    return event_dict


def setup_logging(log_level: str = "INFO", json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    JSON output is the default outside development; development gets the
    coloured console renderer.
    """
    if json_logs is None:
        json_logs = settings.APP_ENV != "development"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        add_service_context,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Kafka and Elasticsearch clients are chatty at DEBUG
    for noisy in ("aiokafka", "kafka", "elastic_transport"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger for *name* (typically ``__name__``)."""
    return structlog.get_logger(name)
