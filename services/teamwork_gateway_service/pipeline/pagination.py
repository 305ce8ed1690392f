"""Pagination metadata extraction and link synthesis.

Teamwork reports paging through ``X-Page``/``X-Pages`` response headers; the
gateway turns those into a ``meta`` block, absolute ``links`` and an
RFC 5988 style ``Link`` header.
"""

from __future__ import annotations

from collections.abc import Mapping
from uuid import UUID

from gateway_service_libs.error_handling import raise_missing_header_error
from starlette.datastructures import URL

from services.teamwork_gateway_service.models.envelope import LinkSet, PageMeta
from services.teamwork_gateway_service.pipeline.constants import (
    PAGE_HEADER,
    PAGE_PARAM,
    SERVICE_NAME,
    TOTAL_PAGES_HEADER,
)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def extract_page_meta(headers: Mapping[str, str], correlation_id: UUID) -> PageMeta:
    """Read the current page and page count from upstream response headers.

    The current page defaults to 1 when absent or unusable. The page count is
    mandatory: without it the links cannot be computed, so its absence is an
    error rather than a default. A count of 0 (no results) is one empty page.
    """
    page = _parse_int(headers.get(PAGE_HEADER))
    if page is None or page < 1:
        page = 1

    raw_total = headers.get(TOTAL_PAGES_HEADER)
    if raw_total is None:
        raise_missing_header_error(
            service=SERVICE_NAME,
            operation="extract_page_meta",
            header=TOTAL_PAGES_HEADER,
            correlation_id=correlation_id,
        )

    total_pages = _parse_int(raw_total)
    if total_pages is None or total_pages < 0:
        raise_missing_header_error(
            service=SERVICE_NAME,
            operation="extract_page_meta",
            header=TOTAL_PAGES_HEADER,
            correlation_id=correlation_id,
            message=f"Upstream response has an invalid {TOTAL_PAGES_HEADER} header",
            value=raw_total,
        )

    return PageMeta(page=page, total_pages=max(total_pages, 1))


def build_links(url: URL | str, meta: PageMeta) -> LinkSet:
    """Links to related pages of ``url``.

    Every query parameter except ``page`` is preserved in order; ``page`` is
    appended last with the target page number.
    """
    base = (url if isinstance(url, URL) else URL(url)).remove_query_params(PAGE_PARAM)

    def page_url(number: int) -> str:
        return str(base.include_query_params(**{PAGE_PARAM: number}))

    return LinkSet(
        first=page_url(1),
        last=page_url(meta.total_pages),
        curr=page_url(meta.page),
        prev=page_url(meta.page - 1) if meta.page > 1 else None,
        next=page_url(meta.page + 1) if meta.page < meta.total_pages else None,
    )


def format_link_header(links: LinkSet) -> str:
    """``self, first[, prev][, next], last`` relation list."""
    relations = [(links.curr, "self"), (links.first, "first")]
    if links.prev is not None:
        relations.append((links.prev, "prev"))
    if links.next is not None:
        relations.append((links.next, "next"))
    relations.append((links.last, "last"))
    return ",".join(f"<{target}>;rel={rel}" for target, rel in relations)
