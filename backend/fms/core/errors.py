"""
Domain exception hierarchy for resource handlers.

All resource exceptions inherit from ResourceError so the API layer can
render them with a single exception handler. Each exception carries the
entity name and an error key for the alert headers.
"""

from __future__ import annotations

from fms.core.constants import ErrorKey


class ResourceError(Exception):
    """Base exception for all resource errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        *,
        entity_name: str,
        error_key: str,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        self.details = details or {}
        super().__init__(message)


class ConflictError(ResourceError):
    """A new record already carries an identifier."""

    def __init__(self, entity_name: str) -> None:
        super().__init__(
            f"A new {entity_name} cannot already have an ID",
            entity_name=entity_name,
            error_key=ErrorKey.ID_EXISTS,
        )


class ValidationError(ResourceError):
    """The request is structurally valid but cannot be applied."""

    @classmethod
    def missing_id(cls, entity_name: str) -> "ValidationError":
        return cls("Invalid id", entity_name=entity_name, error_key=ErrorKey.ID_NULL)


class NotFoundError(ResourceError):
    """No visible record exists at the requested identifier."""

    status_code = 404

    def __init__(self, entity_name: str, record_id: int) -> None:
        super().__init__(
            f"{entity_name} {record_id} not found",
            entity_name=entity_name,
            error_key=ErrorKey.NOT_FOUND,
            details={"id": record_id},
        )
