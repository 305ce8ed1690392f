"""Binding of public routes to upstream Teamwork endpoints."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Request
from fastapi.responses import JSONResponse

from services.teamwork_gateway_service.models.base import UpstreamRecord
from services.teamwork_gateway_service.pipeline.proxy import ProxyPipeline
from services.teamwork_gateway_service.schema.synthesizer import to_snake_case


@dataclass(frozen=True)
class RouteDescriptor:
    """Static description of one proxied list route.

    ``upstream_path`` is relative to the Teamwork base URL and
    ``envelope_key`` names the top-level array in Teamwork's response body.
    """

    upstream_path: str
    envelope_key: str
    record_type: type[UpstreamRecord]


def bind_route(
    record_type: type[UpstreamRecord],
    upstream_path: str,
    envelope_key: str,
) -> Callable[..., Awaitable[JSONResponse]]:
    """Build a FastAPI endpoint that runs the proxy pipeline for one resource."""
    descriptor = RouteDescriptor(
        upstream_path=upstream_path,
        envelope_key=envelope_key,
        record_type=record_type,
    )

    async def list_resource(
        request: Request,
        pipeline: FromDishka[ProxyPipeline],
        correlation_id: FromDishka[UUID],
    ) -> JSONResponse:
        return await pipeline.handle(descriptor, request, correlation_id)

    list_resource.__name__ = f"list_{to_snake_case(record_type.__name__)}"
    list_resource.__qualname__ = list_resource.__name__
    endpoint = inject(list_resource)
    endpoint.descriptor = descriptor  # type: ignore[attr-defined]
    return endpoint
