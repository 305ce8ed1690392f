"""Unit tests for pagination metadata and link synthesis."""

from __future__ import annotations

from uuid import uuid4

import pytest
from gateway_service_libs.error_handling import ErrorCode, GatewayError

from services.teamwork_gateway_service.models.envelope import PageMeta
from services.teamwork_gateway_service.pipeline.pagination import (
    build_links,
    extract_page_meta,
    format_link_header,
)


class TestExtractPageMeta:
    def test_reads_both_headers(self) -> None:
        meta = extract_page_meta({"X-Page": "2", "X-Pages": "5"}, uuid4())

        assert meta == PageMeta(page=2, total_pages=5)

    @pytest.mark.parametrize("raw_page", [None, "", "abc", "0", "-3"])
    def test_current_page_defaults_to_one(self, raw_page: str | None) -> None:
        headers = {"X-Pages": "4"}
        if raw_page is not None:
            headers["X-Page"] = raw_page

        assert extract_page_meta(headers, uuid4()).page == 1

    def test_zero_pages_is_one_empty_page(self) -> None:
        assert extract_page_meta({"X-Pages": "0"}, uuid4()).total_pages == 1

    def test_missing_total_pages_raises(self) -> None:
        with pytest.raises(GatewayError) as exc_info:
            extract_page_meta({"X-Page": "1"}, uuid4())

        assert exc_info.value.error_code == ErrorCode.MISSING_REQUIRED_HEADER.value
        assert exc_info.value.details["header"] == "X-Pages"

    def test_unparsable_total_pages_raises(self) -> None:
        with pytest.raises(GatewayError) as exc_info:
            extract_page_meta({"X-Pages": "many"}, uuid4())

        assert exc_info.value.error_code == ErrorCode.MISSING_REQUIRED_HEADER.value
        assert exc_info.value.details["value"] == "many"


class TestBuildLinks:
    def test_middle_page_has_all_relations(self) -> None:
        links = build_links("http://gw/tasks?page=3", PageMeta(page=3, total_pages=5))

        assert links.curr == "http://gw/tasks?page=3"
        assert links.first == "http://gw/tasks?page=1"
        assert links.prev == "http://gw/tasks?page=2"
        assert links.next == "http://gw/tasks?page=4"
        assert links.last == "http://gw/tasks?page=5"

    def test_first_page_has_no_prev(self) -> None:
        links = build_links("http://gw/tasks", PageMeta(page=1, total_pages=2))

        assert links.prev is None
        assert links.next == "http://gw/tasks?page=2"

    def test_last_page_has_no_next(self) -> None:
        links = build_links("http://gw/tasks", PageMeta(page=2, total_pages=2))

        assert links.prev == "http://gw/tasks?page=1"
        assert links.next is None

    def test_other_params_keep_their_order_and_page_goes_last(self) -> None:
        links = build_links(
            "http://gw/tasks?page=1&b=2&a=1&page=9", PageMeta(page=1, total_pages=1)
        )

        assert links.curr == "http://gw/tasks?b=2&a=1&page=1"


class TestFormatLinkHeader:
    def test_relation_order(self) -> None:
        links = build_links("http://gw/t", PageMeta(page=2, total_pages=3))

        assert format_link_header(links) == (
            "<http://gw/t?page=2>;rel=self,"
            "<http://gw/t?page=1>;rel=first,"
            "<http://gw/t?page=1>;rel=prev,"
            "<http://gw/t?page=3>;rel=next,"
            "<http://gw/t?page=3>;rel=last"
        )

    def test_omits_missing_relations(self) -> None:
        links = build_links("http://gw/t", PageMeta(page=1, total_pages=1))

        assert format_link_header(links) == (
            "<http://gw/t?page=1>;rel=self,"
            "<http://gw/t?page=1>;rel=first,"
            "<http://gw/t?page=1>;rel=last"
        )
