"""Dependency Injection providers for the Teamwork Gateway Service.

APP-scoped infrastructure (settings, HTTP client, metrics, pipeline) and
REQUEST-scoped correlation context.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, from_context, provide
from fastapi import Request
from prometheus_client import REGISTRY, CollectorRegistry

from services.teamwork_gateway_service.app.metrics import GatewayMetrics
from services.teamwork_gateway_service.config import Settings, settings
from services.teamwork_gateway_service.implementations.http_client import TeamworkHttpClient
from services.teamwork_gateway_service.pipeline.proxy import ProxyPipeline
from services.teamwork_gateway_service.protocols import HttpClientProtocol, MetricsProtocol


class TeamworkGatewayProvider(Provider):
    scope = Scope.APP

    def __init__(
        self,
        app_settings: Settings | None = None,
        registry: CollectorRegistry | None = None,
    ) -> None:
        super().__init__()
        self._settings = app_settings or settings
        self._registry = registry or REGISTRY

    @provide
    def get_config(self) -> Settings:
        return self._settings

    @provide(scope=Scope.APP)
    async def get_httpx_client(self, config: Settings) -> AsyncIterator[httpx.AsyncClient]:
        """Shared connection pool, closed when the container closes."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_http_client(self, client: httpx.AsyncClient) -> HttpClientProtocol:
        return TeamworkHttpClient(client)

    @provide(scope=Scope.APP)
    def provide_registry(self) -> CollectorRegistry:
        return self._registry

    @provide(scope=Scope.APP)
    def provide_metrics(self, registry: CollectorRegistry) -> MetricsProtocol:
        return GatewayMetrics(registry)

    @provide(scope=Scope.APP)
    def provide_pipeline(
        self,
        config: Settings,
        http_client: HttpClientProtocol,
        metrics: MetricsProtocol,
    ) -> ProxyPipeline:
        return ProxyPipeline(config, http_client, metrics)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context.

    The correlation ID is read from request state, where CorrelationIDMiddleware
    puts it.
    """

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        return getattr(request.state, "correlation_id", None) or uuid4()
