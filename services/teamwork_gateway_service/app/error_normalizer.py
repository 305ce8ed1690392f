"""
Error normalization for the Teamwork Gateway Service.

Every failure leaves the service as ``{"error": {code, message,
teamwork_response}}``. Upstream error statuses are mirrored to the client with
the upstream body attached; a missing credential is the client's fault (400);
everything else is an internal failure (500) whose details stay in the logs.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from gateway_service_libs.error_handling import ErrorCode, GatewayError
from gateway_service_libs.logging_utils import create_service_logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.teamwork_gateway_service.models.envelope import ErrorBody, ErrorEnvelope
from services.teamwork_gateway_service.pipeline.auth import AUTH_MISSING_MESSAGE
from services.teamwork_gateway_service.pipeline.proxy import canonical_reason
from services.teamwork_gateway_service.protocols import MetricsProtocol

logger = create_service_logger("teamwork_gateway.error_normalizer")

INTERNAL_ERROR_STATUS = 500
AUTH_MISSING_STATUS = 400


def build_error_envelope(
    status_code: int, message: str, teamwork_response: Any = None
) -> dict[str, Any]:
    envelope = ErrorEnvelope(
        error=ErrorBody(code=status_code, message=message, teamwork_response=teamwork_response)
    )
    return envelope.model_dump(mode="json")


def normalize_error(error: GatewayError) -> tuple[int, dict[str, Any]]:
    """Map a GatewayError to the status and body the client receives."""
    if error.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR.value:
        status_code = int(error.details["status_code"])
        return status_code, build_error_envelope(
            status_code, error.error_detail.message, error.details.get("upstream_body")
        )
    if error.error_code == ErrorCode.AUTHENTICATION_ERROR.value:
        return AUTH_MISSING_STATUS, build_error_envelope(AUTH_MISSING_STATUS, AUTH_MISSING_MESSAGE)
    return INTERNAL_ERROR_STATUS, build_error_envelope(
        INTERNAL_ERROR_STATUS, canonical_reason(INTERNAL_ERROR_STATUS)
    )


async def _record_error(request: Request, error_type: str) -> None:
    container = getattr(request.app.state, "dishka_container", None)
    if container is None:
        return
    metrics = await container.get(MetricsProtocol)
    metrics.api_errors_total.labels(endpoint=request.url.path, error_type=error_type).inc()


def register_error_normalizer(app: FastAPI) -> None:
    """Install exception handlers that render every failure as an error envelope."""

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
        status_code, body = normalize_error(exc)
        log = logger.warning if status_code < INTERNAL_ERROR_STATUS else logger.error
        log(
            "Request failed",
            path=request.url.path,
            status_code=status_code,
            error_code=exc.error_code,
            error_message=exc.error_detail.message,
            operation=exc.operation,
            details=exc.details,
            correlation_id=exc.correlation_id,
        )
        await _record_error(request, exc.error_code)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        await _record_error(request, "HTTP_EXCEPTION")
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_envelope(exc.status_code, canonical_reason(exc.status_code)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )
        await _record_error(request, ErrorCode.UNKNOWN_ERROR.value)
        return JSONResponse(
            status_code=INTERNAL_ERROR_STATUS,
            content=build_error_envelope(
                INTERNAL_ERROR_STATUS, canonical_reason(INTERNAL_ERROR_STATUS)
            ),
        )
