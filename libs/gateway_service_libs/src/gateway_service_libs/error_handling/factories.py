"""
Factory functions for raising GatewayError instances.

Each factory builds an ErrorDetail with the proper error code, captures the
caller's context, and raises. Additional keyword arguments are stored in
``ErrorDetail.details``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, NoReturn
from uuid import UUID

from gateway_service_libs.error_handling.error_models import ErrorCode, ErrorDetail
from gateway_service_libs.error_handling.gateway_error import GatewayError


def create_error_detail(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: UUID,
    details: dict[str, Any] | None = None,
) -> ErrorDetail:
    """Build an ErrorDetail stamped with the current UTC time."""
    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id,
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details or {},
    )


def _raise(
    error_code: ErrorCode,
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    details: dict[str, Any],
) -> NoReturn:
    raise GatewayError(
        create_error_detail(
            error_code=error_code,
            message=message,
            service=service,
            operation=operation,
            correlation_id=correlation_id,
            details=details,
        )
    )


def raise_configuration_error(
    service: str,
    operation: str,
    config_key: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when a required setting is missing or invalid."""
    _raise(
        ErrorCode.CONFIGURATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"config_key": config_key, **additional_context},
    )


def raise_authentication_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when no credentials are available for the upstream call."""
    _raise(
        ErrorCode.AUTHENTICATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        additional_context,
    )


def raise_upstream_error(
    service: str,
    operation: str,
    external_service: str,
    status_code: int,
    reason: str,
    correlation_id: UUID,
    upstream_body: Any = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise when an external service answered with a non-success status.

    The status, its canonical reason and the (best-effort decoded) response body
    are preserved so they can be mirrored to the caller.
    """
    _raise(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        service,
        operation,
        reason,
        correlation_id,
        {
            "external_service": external_service,
            "status_code": status_code,
            "upstream_body": upstream_body,
            **additional_context,
        },
    )


def raise_missing_header_error(
    service: str,
    operation: str,
    header: str,
    correlation_id: UUID,
    message: str | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise when an upstream response lacks a header the service depends on."""
    _raise(
        ErrorCode.MISSING_REQUIRED_HEADER,
        service,
        operation,
        message or f"Upstream response missing expected header {header}",
        correlation_id,
        {"header": header, **additional_context},
    )


def raise_timeout_error(
    service: str,
    operation: str,
    timeout_seconds: float,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when an outbound call timed out."""
    _raise(
        ErrorCode.TIMEOUT,
        service,
        operation,
        message,
        correlation_id,
        {"timeout_seconds": timeout_seconds, **additional_context},
    )


def raise_connection_error(
    service: str,
    operation: str,
    target: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when an outbound call could not be delivered (DNS, connect, protocol)."""
    _raise(
        ErrorCode.CONNECTION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"target": target, **additional_context},
    )


def raise_parsing_error(
    service: str,
    operation: str,
    parse_target: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when a payload does not match the shape the service expects."""
    _raise(
        ErrorCode.PARSING_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"parse_target": parse_target, **additional_context},
    )
