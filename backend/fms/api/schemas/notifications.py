"""Notification request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from fms.api.schemas.base import ReadSchema, WriteSchema
from fms.core.constants import NotificationType
from fms.db.models import Notification


class NotificationWrite(WriteSchema):
    """``createdAt`` is server-set on insert and not writable."""

    __orm_model__ = Notification

    passenger_id: str | None = Field(None, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    message: str | None = None
    notification_type: NotificationType = NotificationType.INFO


class NotificationRead(ReadSchema):
    passenger_id: str | None = None
    title: str
    message: str | None = None
    notification_type: NotificationType
    created_at: datetime | None = None
