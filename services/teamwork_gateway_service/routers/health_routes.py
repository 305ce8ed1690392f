"""Health and metrics routes for the Teamwork Gateway Service."""

from __future__ import annotations

from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from gateway_service_libs.logging_utils import create_service_logger
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from services.teamwork_gateway_service.config import Settings

router = APIRouter(tags=["Health"])

logger = create_service_logger("teamwork_gateway.routers.health")


@router.get("/healthz")
@inject
async def health_check(config: FromDishka[Settings]) -> dict[str, str | dict]:
    """Liveness plus a report of whether upstream credentials are configured."""
    checks = {
        "service_responsive": True,
        "upstream_configured": config.TEAMWORK_URL is not None,
        "static_api_key_configured": config.API_KEY is not None,
    }
    overall_status = "healthy" if checks["upstream_configured"] else "unhealthy"
    logger.debug("Health check requested", status=overall_status)

    return {
        "service": config.SERVICE_NAME,
        "status": overall_status,
        "message": f"Teamwork Gateway Service is {overall_status}",
        "version": "0.1.0",
        "checks": checks,
        "environment": config.ENVIRONMENT.value,
    }


@router.get("/metrics", response_class=PlainTextResponse)
@inject
async def metrics(registry: FromDishka[CollectorRegistry]):
    """Prometheus metrics endpoint."""
    return PlainTextResponse(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
