"""Credential resolution for upstream calls."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from uuid import UUID

from gateway_service_libs.error_handling import raise_authentication_error

from services.teamwork_gateway_service.pipeline.constants import SERVICE_NAME

AUTH_MISSING_MESSAGE = "Request missing authorization header and API_KEY is unset"


def basic_auth_header(api_key: str) -> str:
    """Teamwork's API-key scheme: the key as username with a blank password."""
    token = base64.b64encode(f"{api_key}: ".encode()).decode("ascii")
    return f"Basic {token}"


def resolve_authorization(
    headers: Mapping[str, str],
    api_key: str | None,
    correlation_id: UUID,
) -> str:
    """Authorization value to send upstream.

    An inbound Authorization header is forwarded verbatim. Otherwise the
    configured static key is used. With neither, the request fails before any
    network call is made.
    """
    inbound = headers.get("authorization")
    if inbound is not None:
        return inbound
    if api_key:
        return basic_auth_header(api_key)

    raise_authentication_error(
        service=SERVICE_NAME,
        operation="resolve_authorization",
        message=AUTH_MISSING_MESSAGE,
        correlation_id=correlation_id,
    )
