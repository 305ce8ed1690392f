"""Request pipeline that proxies list routes to Teamwork."""

from services.teamwork_gateway_service.pipeline.auth import (
    basic_auth_header,
    resolve_authorization,
)
from services.teamwork_gateway_service.pipeline.pagination import (
    build_links,
    extract_page_meta,
    format_link_header,
)
from services.teamwork_gateway_service.pipeline.proxy import ProxyPipeline

__all__ = [
    "ProxyPipeline",
    "basic_auth_header",
    "build_links",
    "extract_page_meta",
    "format_link_header",
    "resolve_authorization",
]
