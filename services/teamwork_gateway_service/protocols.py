"""
Protocols for the Teamwork Gateway Service.

Business logic depends on these protocols, not concrete implementations.
"""

from __future__ import annotations

from typing import Protocol

import httpx
from prometheus_client import Counter, Histogram


class HttpClientProtocol(Protocol):
    """Outbound transport used to reach the upstream API."""

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> httpx.Response:
        """Send a single GET request. Transport failures raise httpx.TransportError."""
        ...


class MetricsProtocol(Protocol):
    """Protocol for metrics collection matching GatewayMetrics."""

    @property
    def http_requests_total(self) -> Counter:
        """Total HTTP requests counter."""
        ...

    @property
    def http_request_duration_seconds(self) -> Histogram:
        """HTTP request duration histogram."""
        ...

    @property
    def upstream_calls_total(self) -> Counter:
        """Upstream calls counter."""
        ...

    @property
    def upstream_call_duration_seconds(self) -> Histogram:
        """Upstream call duration histogram."""
        ...

    @property
    def api_errors_total(self) -> Counter:
        """API errors counter."""
        ...
