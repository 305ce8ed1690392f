"""Middleware for the Teamwork Gateway Service."""

from __future__ import annotations

import time
from uuid import UUID, uuid4

from fastapi import Request
from gateway_service_libs.logging_utils import (
    bind_request_context,
    clear_request_context,
    create_service_logger,
)
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from services.teamwork_gateway_service.protocols import MetricsProtocol

logger = create_service_logger("teamwork_gateway.middleware")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure every request has a correlation ID as UUID.

    The ID is stored on ``request.state``, bound to the structlog context for
    the duration of the request, and echoed in the response headers.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        x_correlation_id = request.headers.get(CORRELATION_HEADER)
        if x_correlation_id:
            try:
                correlation_id = UUID(x_correlation_id)
            except ValueError:
                logger.warning(
                    "Invalid correlation ID format, generating new one",
                    received=x_correlation_id,
                )
                correlation_id = uuid4()
        else:
            correlation_id = uuid4()

        request.state.correlation_id = correlation_id
        bind_request_context(correlation_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()

        response.headers[CORRELATION_HEADER] = str(correlation_id)
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request count and latency for every handled request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        container = getattr(request.app.state, "dishka_container", None)
        if container is not None:
            metrics = await container.get(MetricsProtocol)
            route = request.scope.get("route")
            endpoint = getattr(route, "path", request.url.path)
            metrics.http_requests_total.labels(
                method=request.method, endpoint=endpoint, http_status=str(response.status_code)
            ).inc()
            metrics.http_request_duration_seconds.labels(
                method=request.method, endpoint=endpoint
            ).observe(elapsed)
        return response
