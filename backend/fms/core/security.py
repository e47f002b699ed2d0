"""
Bearer-token helpers.

Tokens are issued by the gateway; services only decode them to learn the
login of the calling principal. ``create_access_token`` exists for
scripts and tests that need to act as a given user.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from fms.core.config import settings


def create_access_token(claims: dict[str, Any], expires_minutes: int | None = None) -> str:
    """Sign *claims* into a JWT with an ``exp`` claim."""
    to_encode = dict(claims)
    minutes = expires_minutes if expires_minutes is not None else settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Return the token payload, or None when the token is invalid or expired."""
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def principal_login(payload: dict[str, Any]) -> str | None:
    """
    Extract the principal login from a token payload.

    Gateway-issued tokens carry the login in ``user_name``; plain JWTs use
    ``sub``.
    """
    login = payload.get("user_name") or payload.get("sub")
    if not isinstance(login, str) or not login:
        return None
    return login
