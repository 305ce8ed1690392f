"""Application factory and entry point for the Teamwork Gateway Service."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from dishka import AsyncContainer
from fastapi import FastAPI
from gateway_service_libs.logging_utils import configure_service_logging, create_service_logger

from services.teamwork_gateway_service.app.error_normalizer import register_error_normalizer
from services.teamwork_gateway_service.app.middleware import (
    CorrelationIDMiddleware,
    MetricsMiddleware,
)
from services.teamwork_gateway_service.app.startup_setup import (
    create_di_container,
    setup_dependency_injection,
    validate_settings,
)
from services.teamwork_gateway_service.config import Settings, settings
from services.teamwork_gateway_service.routers.health_routes import router as health_router
from services.teamwork_gateway_service.routers.resource_routes import router as resource_router

logger = create_service_logger("teamwork_gateway.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Teamwork Gateway Service started")
    yield
    await app.state.dishka_container.close()
    logger.info("Teamwork Gateway Service stopped")


def create_app(
    app_settings: Settings | None = None,
    container: AsyncContainer | None = None,
) -> FastAPI:
    """Build the application.

    Raises a GatewayError with ``CONFIGURATION_ERROR`` when ``TEAMWORK_URL`` is
    not configured. Tests pass their own ``container`` to replace the
    production providers.
    """
    app_settings = app_settings or settings
    configure_service_logging(
        app_settings.SERVICE_NAME,
        environment=app_settings.ENVIRONMENT.value,
        log_level=app_settings.LOG_LEVEL,
    )
    validate_settings(app_settings)

    app = FastAPI(
        title=app_settings.SERVICE_NAME,
        version="0.1.0",
        description="Teamwork Gateway - normalized, paginated access to Teamwork list endpoints",
        docs_url="/docs" if app_settings.is_development() else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    register_error_normalizer(app)

    app.add_middleware(MetricsMiddleware)
    # Outermost, so every response carries the correlation ID
    app.add_middleware(CorrelationIDMiddleware)

    app.include_router(health_router)
    app.include_router(resource_router)

    setup_dependency_injection(app, container or create_di_container(app_settings))
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "services.teamwork_gateway_service.app.main:create_app",
        factory=True,
        host=settings.HTTP_HOST,
        port=settings.HTTP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
