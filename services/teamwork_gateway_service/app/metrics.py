"""Metrics definitions for the Teamwork Gateway Service."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class GatewayMetrics:
    """A container for all Prometheus metrics for the Teamwork Gateway Service."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics with optional registry for test isolation."""
        if registry is None:
            registry = REGISTRY
        self.http_requests_total = Counter(
            "teamwork_gateway_http_requests_total",
            "Total number of HTTP requests handled by the Teamwork Gateway.",
            ["method", "endpoint", "http_status"],
            registry=registry,
        )
        self.http_request_duration_seconds = Histogram(
            "teamwork_gateway_http_request_duration_seconds",
            "HTTP request duration in seconds for the Teamwork Gateway.",
            ["method", "endpoint"],
            registry=registry,
        )
        self.upstream_calls_total = Counter(
            "teamwork_gateway_upstream_calls_total",
            "Total number of calls to the Teamwork API.",
            ["upstream_path", "status_code"],
            registry=registry,
        )
        self.upstream_call_duration_seconds = Histogram(
            "teamwork_gateway_upstream_call_duration_seconds",
            "Duration of calls to the Teamwork API in seconds.",
            ["upstream_path"],
            registry=registry,
        )
        self.api_errors_total = Counter(
            "teamwork_gateway_api_errors_total",
            "Total number of API errors by error code.",
            ["endpoint", "error_type"],
            registry=registry,
        )
