"""Startup setup for the Teamwork Gateway Service."""

from __future__ import annotations

from uuid import uuid4

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from gateway_service_libs.error_handling import raise_configuration_error
from gateway_service_libs.logging_utils import create_service_logger
from prometheus_client import CollectorRegistry

from services.teamwork_gateway_service.app.di import (
    RequestContextProvider,
    TeamworkGatewayProvider,
)
from services.teamwork_gateway_service.config import Settings
from services.teamwork_gateway_service.pipeline.constants import SERVICE_NAME

logger = create_service_logger("teamwork_gateway.startup")


def validate_settings(app_settings: Settings) -> None:
    """Fail fast on settings the service cannot start without."""
    if app_settings.TEAMWORK_URL is None:
        raise_configuration_error(
            service=SERVICE_NAME,
            operation="validate_settings",
            config_key="TEAMWORK_URL",
            message="TEAMWORK_URL must be set to the Teamwork API base URL",
            correlation_id=uuid4(),
        )
    if app_settings.API_KEY is None:
        logger.warning(
            "API_KEY is not set; requests without an Authorization header will be rejected"
        )


def create_di_container(
    app_settings: Settings,
    registry: CollectorRegistry | None = None,
) -> AsyncContainer:
    """Create and configure the DI container."""
    logger.info("Creating DI container...")
    container = make_async_container(
        TeamworkGatewayProvider(app_settings, registry),
        RequestContextProvider(),
    )
    logger.info("DI container created successfully")
    return container


def setup_dependency_injection(app: FastAPI, container: AsyncContainer) -> None:
    """Setup Dishka integration with FastAPI."""
    setup_dishka(container, app)
    logger.info("Dependency injection setup completed")
