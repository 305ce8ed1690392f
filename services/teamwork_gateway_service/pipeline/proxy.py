"""The per-request proxy pipeline shared by every resource route."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from uuid import UUID

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse
from gateway_service_libs.error_handling import (
    raise_connection_error,
    raise_parsing_error,
    raise_timeout_error,
    raise_upstream_error,
)
from gateway_service_libs.logging_utils import create_service_logger
from pydantic import ValidationError

from services.teamwork_gateway_service.config import Settings
from services.teamwork_gateway_service.models.base import UpstreamRecord
from services.teamwork_gateway_service.models.envelope import NormalizedResponse
from services.teamwork_gateway_service.pipeline.auth import resolve_authorization
from services.teamwork_gateway_service.pipeline.constants import SERVICE_NAME, UPSTREAM_NAME
from services.teamwork_gateway_service.pipeline.pagination import (
    build_links,
    extract_page_meta,
    format_link_header,
)
from services.teamwork_gateway_service.protocols import HttpClientProtocol, MetricsProtocol

if TYPE_CHECKING:
    from services.teamwork_gateway_service.routing import RouteDescriptor

logger = create_service_logger("teamwork_gateway.pipeline.proxy")


def canonical_reason(status_code: int) -> str:
    return httpx.codes.get_reason_phrase(status_code) or "Unknown Status"


def best_effort_body(response: httpx.Response) -> Any:
    """Upstream body as JSON when it parses, raw text otherwise, None when empty."""
    try:
        text = response.text
    except UnicodeDecodeError:
        text = response.content.decode("utf-8", errors="replace")
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


class ProxyPipeline:
    """Forward a list request to Teamwork and normalize the answer.

    Steps, in order: resolve credentials, build the upstream URL, send the
    request, check the status, read pagination headers, decode the records,
    and assemble the ``{data, meta, links}`` envelope plus ``Link`` header.
    Any failing step raises a GatewayError and stops the pipeline.
    """

    def __init__(
        self,
        settings: Settings,
        http_client: HttpClientProtocol,
        metrics: MetricsProtocol,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._metrics = metrics

    def build_upstream_url(self, descriptor: RouteDescriptor, query: str) -> str:
        """Upstream URL with the inbound query string forwarded untouched."""
        url = self._settings.upstream_url(descriptor.upstream_path)
        return f"{url}?{query}" if query else url

    async def handle(
        self,
        descriptor: RouteDescriptor,
        request: Request,
        correlation_id: UUID,
    ) -> JSONResponse:
        authorization = resolve_authorization(
            request.headers, self._settings.static_api_key(), correlation_id
        )
        upstream_url = self.build_upstream_url(descriptor, request.url.query)

        logger.info(
            "Proxying list request",
            route=request.url.path,
            upstream_path=descriptor.upstream_path,
            correlation_id=str(correlation_id),
        )

        response = await self._send(descriptor, upstream_url, authorization, correlation_id)
        self._check_status(descriptor, response, correlation_id)

        meta = extract_page_meta(response.headers, correlation_id)
        records = self._decode_records(descriptor, response, correlation_id)
        links = build_links(request.url, meta)

        envelope = NormalizedResponse[descriptor.record_type](  # type: ignore[name-defined]
            data=records, meta=meta, links=links
        )
        return JSONResponse(
            content=envelope.to_json_body(),
            status_code=200,
            headers={"Link": format_link_header(links)},
        )

    async def _send(
        self,
        descriptor: RouteDescriptor,
        upstream_url: str,
        authorization: str,
        correlation_id: UUID,
    ) -> httpx.Response:
        headers = {
            "Authorization": authorization,
            "Accept": "application/json",
            "X-Correlation-ID": str(correlation_id),
        }
        duration = self._metrics.upstream_call_duration_seconds.labels(
            upstream_path=descriptor.upstream_path
        )
        try:
            with duration.time():
                response = await self._http_client.get(upstream_url, headers=headers)
        except httpx.TimeoutException as exc:
            self._metrics.upstream_calls_total.labels(
                upstream_path=descriptor.upstream_path, status_code="timeout"
            ).inc()
            logger.error(
                "Upstream request timed out",
                upstream_path=descriptor.upstream_path,
                error=str(exc),
                correlation_id=str(correlation_id),
            )
            raise_timeout_error(
                service=SERVICE_NAME,
                operation="send_upstream_request",
                timeout_seconds=self._settings.HTTP_CLIENT_TIMEOUT_SECONDS,
                message=f"Request to {UPSTREAM_NAME} timed out",
                correlation_id=correlation_id,
                upstream_path=descriptor.upstream_path,
            )
        except httpx.TransportError as exc:
            self._metrics.upstream_calls_total.labels(
                upstream_path=descriptor.upstream_path, status_code="connection_error"
            ).inc()
            logger.error(
                "Upstream request failed",
                upstream_path=descriptor.upstream_path,
                error=str(exc),
                error_type=type(exc).__name__,
                correlation_id=str(correlation_id),
            )
            raise_connection_error(
                service=SERVICE_NAME,
                operation="send_upstream_request",
                target=UPSTREAM_NAME,
                message=f"Failed to reach {UPSTREAM_NAME}: {type(exc).__name__}",
                correlation_id=correlation_id,
                upstream_path=descriptor.upstream_path,
            )

        self._metrics.upstream_calls_total.labels(
            upstream_path=descriptor.upstream_path, status_code=str(response.status_code)
        ).inc()
        return response

    def _check_status(
        self,
        descriptor: RouteDescriptor,
        response: httpx.Response,
        correlation_id: UUID,
    ) -> None:
        if response.is_success:
            return

        logger.warning(
            "Upstream returned an error status",
            upstream_path=descriptor.upstream_path,
            status_code=response.status_code,
            correlation_id=str(correlation_id),
        )
        raise_upstream_error(
            service=SERVICE_NAME,
            operation="check_upstream_status",
            external_service=UPSTREAM_NAME,
            status_code=response.status_code,
            reason=canonical_reason(response.status_code),
            correlation_id=correlation_id,
            upstream_body=best_effort_body(response),
        )

    def _decode_records(
        self,
        descriptor: RouteDescriptor,
        response: httpx.Response,
        correlation_id: UUID,
    ) -> list[UpstreamRecord]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise_parsing_error(
                service=SERVICE_NAME,
                operation="decode_upstream_body",
                parse_target=descriptor.upstream_path,
                message=f"Upstream body is not valid JSON: {exc}",
                correlation_id=correlation_id,
            )

        items = payload.get(descriptor.envelope_key) if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise_parsing_error(
                service=SERVICE_NAME,
                operation="decode_upstream_body",
                parse_target=descriptor.upstream_path,
                message=f"Upstream body has no {descriptor.envelope_key!r} array",
                correlation_id=correlation_id,
            )

        try:
            return [descriptor.record_type.model_validate(item) for item in items]
        except ValidationError as exc:
            logger.error(
                "Upstream records failed validation",
                upstream_path=descriptor.upstream_path,
                error_count=exc.error_count(),
                correlation_id=str(correlation_id),
            )
            raise_parsing_error(
                service=SERVICE_NAME,
                operation="decode_upstream_body",
                parse_target=descriptor.record_type.__name__,
                message=f"Upstream records do not match {descriptor.record_type.__name__}",
                correlation_id=correlation_id,
                error_count=exc.error_count(),
            )
