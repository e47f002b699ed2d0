"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fms.core.security import decode_access_token, principal_login
from fms.db.session import get_db as _get_db
from fms.services.crud import SideEffects

security_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


async def get_current_login(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> str | None:
    """
    Login of the calling principal, or None for anonymous calls.

    Anonymous callers are not rejected here: ownership-aware resources
    simply show them nothing. A token that is present but invalid is a 401.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return principal_login(payload)


async def get_side_effects(request: Request) -> SideEffects:
    """Kafka publisher and search mirror created in the app lifespan."""
    return SideEffects(
        publisher=request.app.state.event_publisher,
        search=request.app.state.search_mirror,
    )
