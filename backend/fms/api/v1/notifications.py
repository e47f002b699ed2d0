"""Notifications service: CRUD plus free-text search over the mirror."""

from fastapi import APIRouter, Depends, Query

from fms.api.crud import crud_router
from fms.api.deps import get_side_effects
from fms.api.schemas.notifications import NotificationRead, NotificationWrite
from fms.core.logging import get_logger
from fms.services import resources
from fms.services.crud import SideEffects

logger = get_logger(__name__)

router = APIRouter()
router.include_router(
    crud_router(
        resources.notifications,
        path="notifications",
        write_schema=NotificationWrite,
        read_schema=NotificationRead,
        tags=["Notifications"],
    )
)


@router.get("/_search/notifications", response_model=list[NotificationRead], tags=["Notifications"])
async def search_notifications(
    query: str = Query(..., min_length=1),
    effects: SideEffects = Depends(get_side_effects),
):
    """Free-text search; results keep the search engine's relevance order."""
    logger.debug("Request to search notifications", query=query)
    hits = await effects.search.query(query)
    return [NotificationRead.model_validate(hit) for hit in hits]
