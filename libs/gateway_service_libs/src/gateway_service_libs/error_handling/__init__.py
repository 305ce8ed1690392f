"""Error handling utilities for gateway services."""

from gateway_service_libs.error_handling.error_models import ErrorCode, ErrorDetail
from gateway_service_libs.error_handling.factories import (
    create_error_detail,
    raise_authentication_error,
    raise_configuration_error,
    raise_connection_error,
    raise_missing_header_error,
    raise_parsing_error,
    raise_timeout_error,
    raise_upstream_error,
)
from gateway_service_libs.error_handling.gateway_error import GatewayError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "GatewayError",
    "create_error_detail",
    "raise_authentication_error",
    "raise_configuration_error",
    "raise_connection_error",
    "raise_missing_header_error",
    "raise_parsing_error",
    "raise_timeout_error",
    "raise_upstream_error",
]
