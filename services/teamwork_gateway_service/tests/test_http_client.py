"""Tests for the httpx-backed upstream client."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from services.teamwork_gateway_service.implementations.http_client import TeamworkHttpClient


@pytest.mark.asyncio
async def test_get_returns_raw_response_without_raising(respx_mock: MockRouter) -> None:
    route = respx_mock.get("https://teamwork.test/tasks.json").mock(
        return_value=httpx.Response(500, text="boom")
    )

    async with httpx.AsyncClient() as client:
        response = await TeamworkHttpClient(client).get(
            "https://teamwork.test/tasks.json", headers={"Authorization": "Basic x"}
        )

    assert response.status_code == 500
    assert route.calls.last.request.headers["Authorization"] == "Basic x"


@pytest.mark.asyncio
async def test_transport_errors_propagate(respx_mock: MockRouter) -> None:
    respx_mock.get("https://teamwork.test/tasks.json").mock(
        side_effect=httpx.ReadTimeout("slow")
    )

    async with httpx.AsyncClient() as client:
        with pytest.raises(httpx.TimeoutException):
            await TeamworkHttpClient(client).get("https://teamwork.test/tasks.json", timeout=0.1)
