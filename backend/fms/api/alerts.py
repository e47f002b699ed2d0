"""
Alert headers attached to REST responses.

Clients show these as toasts: ``X-<app>-alert`` holds a message key for
successful mutations, ``X-<app>-error`` one for failures, and
``X-<app>-params`` the id or entity name the message refers to.
"""

from __future__ import annotations

from fms.core.config import settings


def _prefix() -> str:
    return f"X-{settings.APP_NAME}"


def entity_alert(entity_name: str, action: str, param: object) -> dict[str, str]:
    """Headers for a created/updated/deleted entity."""
    return {
        f"{_prefix()}-alert": f"{settings.APP_NAME}.{entity_name}.{action}",
        f"{_prefix()}-params": str(param),
    }


def entity_error(entity_name: str, error_key: str) -> dict[str, str]:
    """Headers for a failed request on an entity."""
    return {
        f"{_prefix()}-error": f"error.{error_key}",
        f"{_prefix()}-params": entity_name,
    }
