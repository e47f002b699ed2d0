"""
Shared schema bases.

JSON bodies use camelCase (``passengerId``, ``toPay``); Python code uses
snake_case. Write schemas carry an optional ``id``: its presence or
absence is checked by the resource, not by validation, so a wrong id
yields 400 rather than 422.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class WriteSchema(CamelModel):
    """Request body for POST and PUT."""

    __orm_model__: ClassVar[type]

    id: int | None = None

    def to_model(self) -> Any:
        """Build a transient ORM instance carrying every field of the body."""
        return self.__orm_model__(**self.model_dump())


class ReadSchema(CamelModel):
    """Response body for a single record."""

    id: int

    @classmethod
    def from_model(cls, record: Any) -> "ReadSchema":
        return cls.model_validate(record)


class ErrorResponse(CamelModel):
    """Body of every 4xx raised by a resource."""

    detail: str
    entity_name: str
    error_key: str
