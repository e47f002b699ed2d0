"""
Router factory for CrudResource-backed endpoints.

``crud_router`` mounts the five standard endpoints for one resource:

    POST   /{path}          201 + Location, 400 if the body has an id
    PUT    /{path}          200, 400 if the body has no id
    GET    /{path}          list, optional ?filter=
    GET    /{path}/{id}     200 or 404
    DELETE /{path}/{id}     204 or 404

Annotations below are evaluated eagerly (no ``from __future__ import
annotations``) so FastAPI sees the concrete schema classes bound in the
factory closure.
"""

from typing import Callable

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fms.api.alerts import entity_alert
from fms.api.deps import get_current_login, get_db, get_side_effects
from fms.api.schemas.base import ErrorResponse, ReadSchema, WriteSchema
from fms.services.crud import CrudResource, SideEffects

API_PREFIX = "/api"


def crud_router(
    resource: CrudResource,
    *,
    path: str,
    write_schema: type[WriteSchema],
    read_schema: type[ReadSchema],
    tags: list[str],
    to_read: Callable[..., ReadSchema] | None = None,
) -> APIRouter:
    """Build the CRUD router for *resource* under ``/api/{path}``."""
    router = APIRouter(
        prefix=f"/{path}",
        tags=tags,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        },
    )
    render = to_read or read_schema.from_model
    name = resource.entity_name

    @router.post("", status_code=status.HTTP_201_CREATED, response_model=read_schema)
    async def create(
        payload: write_schema,
        response: Response,
        db: AsyncSession = Depends(get_db),
        login: str | None = Depends(get_current_login),
        effects: SideEffects = Depends(get_side_effects),
    ):
        record = await resource.create(db, payload.to_model(), principal=login, effects=effects)
        response.headers["Location"] = f"{API_PREFIX}/{path}/{record.id}"
        response.headers.update(entity_alert(name, "created", record.id))
        return render(record)

    @router.put("", response_model=read_schema)
    async def update(
        payload: write_schema,
        response: Response,
        db: AsyncSession = Depends(get_db),
        login: str | None = Depends(get_current_login),
        effects: SideEffects = Depends(get_side_effects),
    ):
        record = await resource.update(db, payload.to_model(), principal=login, effects=effects)
        response.headers.update(entity_alert(name, "updated", record.id))
        return render(record)

    @router.get("", response_model=list[read_schema])
    async def list_records(
        filter_name: str | None = Query(None, alias="filter"),
        db: AsyncSession = Depends(get_db),
        login: str | None = Depends(get_current_login),
    ):
        records = await resource.list(db, principal=login, filter_name=filter_name)
        return [render(r) for r in records]

    @router.get("/{record_id}", response_model=read_schema)
    async def get_record(
        record_id: int,
        db: AsyncSession = Depends(get_db),
        login: str | None = Depends(get_current_login),
    ):
        return render(await resource.get(db, record_id, principal=login))

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(
        record_id: int,
        db: AsyncSession = Depends(get_db),
        login: str | None = Depends(get_current_login),
        effects: SideEffects = Depends(get_side_effects),
    ) -> Response:
        await resource.delete(db, record_id, principal=login, effects=effects)
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers=entity_alert(name, "deleted", record_id),
        )

    # Distinct operation ids per resource in the OpenAPI document
    for route in router.routes:
        route.name = f"{route.name}_{name}"
        route.operation_id = route.name

    return router
