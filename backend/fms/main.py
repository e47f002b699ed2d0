"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fms.api.alerts import entity_error
from fms.api.crud import API_PREFIX
from fms.api.v1 import bookings, flights, notifications, passengers, payments
from fms.core.config import settings
from fms.core.constants import ServiceName
from fms.core.errors import ResourceError
from fms.core.logging import get_logger, setup_logging
from fms.db.session import create_tables
from fms.services.events import EventPublisher
from fms.services.search import SearchMirror

SERVICE_ROUTERS: dict[ServiceName, list[APIRouter]] = {
    ServiceName.PAYMENTS: [payments.router],
    ServiceName.FLIGHTS: [flights.router],
    ServiceName.PASSENGERS: [passengers.router],
    ServiceName.BOOKINGS: [bookings.router],
    ServiceName.NOTIFICATIONS: [notifications.router],
}


def routers_for(service: str) -> list[APIRouter]:
    """Routers one service exposes; ``all`` mounts every service."""
    service_name = ServiceName(service)
    if service_name == ServiceName.ALL:
        return [r for routers in SERVICE_ROUTERS.values() for r in routers]
    return SERVICE_ROUTERS[service_name]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV, service=app.state.service_name)

    if settings.DB_CREATE_TABLES:
        await create_tables()
        logger.info("Database tables ensured")

    app.state.event_publisher = EventPublisher.from_settings()
    await app.state.event_publisher.start()
    app.state.search_mirror = SearchMirror.from_settings()

    yield

    logger.info("Application shutting down")
    try:
        await app.state.event_publisher.stop()
    finally:
        await app.state.search_mirror.close()


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    """Render domain errors as JSON with alert headers."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "entityName": exc.entity_name, "errorKey": exc.error_key},
        headers=entity_error(exc.entity_name, exc.error_key),
    )


def create_app(service: str | None = None) -> FastAPI:
    """Build the application for one service (default: ``SERVICE_NAME``)."""
    service = service or settings.SERVICE_NAME

    app = FastAPI(
        title="FMS Services API",
        description=f"Flight management system: {service} service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.service_name = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ResourceError, resource_error_handler)

    for router in routers_for(service):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Public health-check endpoint."""
        return {"status": "ok", "service": service, "env": settings.APP_ENV}

    return app


app = create_app()
