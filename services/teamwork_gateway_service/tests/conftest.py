"""Shared fixtures for Teamwork Gateway Service tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from dishka import AsyncContainer, make_async_container
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from prometheus_client import CollectorRegistry

from services.teamwork_gateway_service.app.di import RequestContextProvider
from services.teamwork_gateway_service.app.main import create_app
from services.teamwork_gateway_service.config import Settings
from services.teamwork_gateway_service.tests.test_provider import (
    InfrastructureTestProvider,
    make_test_settings,
)

SAMPLES_DIR = Path(__file__).parent.parent / "schema" / "samples"


def load_sample(filename: str) -> dict[str, Any]:
    return json.loads((SAMPLES_DIR / filename).read_text(encoding="utf-8"))


@pytest.fixture
def test_settings() -> Settings:
    return make_test_settings()


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
async def container(
    test_settings: Settings, registry: CollectorRegistry
) -> AsyncIterator[AsyncContainer]:
    """Create test container with the test infrastructure provider."""
    container = make_async_container(
        InfrastructureTestProvider(settings=test_settings, registry=registry),
        RequestContextProvider(),
    )
    yield container
    await container.close()


@pytest.fixture
def app(test_settings: Settings, container: AsyncContainer) -> FastAPI:
    return create_app(test_settings, container)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def task_sample() -> dict[str, Any]:
    return load_sample("task.json")


@pytest.fixture
def time_entry_sample() -> dict[str, Any]:
    return load_sample("time_entry.json")


@pytest.fixture
def task_list_sample() -> dict[str, Any]:
    return load_sample("task_list.json")
