"""Tests for logging_utils processors and request context binding."""

from __future__ import annotations

import io
import json
import os
from typing import Any
from uuid import uuid4

import pytest
import structlog
from structlog.contextvars import get_contextvars

from gateway_service_libs.logging_utils import (
    add_service_context,
    bind_request_context,
    clear_request_context,
    configure_service_logging,
    create_service_logger,
)


@pytest.fixture(autouse=True)
def _restore_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "test_service")
    monkeypatch.setenv("ENVIRONMENT", "development")


class TestAddServiceContext:
    """Tests for the add_service_context processor."""

    def test_adds_service_name_from_env(self) -> None:
        """Verify service.name is added from SERVICE_NAME environment variable."""
        event_dict: dict[str, Any] = {"event": "test message"}

        result = add_service_context(None, "", event_dict)

        assert result["service.name"] == "test_service"

    def test_adds_deployment_environment_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify deployment.environment is added from ENVIRONMENT variable."""
        monkeypatch.setenv("ENVIRONMENT", "production")

        result = add_service_context(None, "", {"event": "test message"})

        assert result["deployment.environment"] == "production"

    def test_preserves_existing_fields(self) -> None:
        """Verify existing event_dict fields are preserved."""
        event_dict: dict[str, Any] = {
            "event": "test message",
            "correlation_id": "abc-123",
            "level": "info",
        }

        result = add_service_context(None, "", event_dict)

        assert result["event"] == "test message"
        assert result["correlation_id"] == "abc-123"
        assert result["level"] == "info"

    def test_handles_missing_service_name_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify defaults to 'unknown' when SERVICE_NAME not set."""
        monkeypatch.delenv("SERVICE_NAME", raising=False)

        result = add_service_context(None, "", {"event": "test message"})

        assert result["service.name"] == "unknown"


class TestRequestContext:
    """Tests for per-request contextvars binding."""

    def test_bind_request_context_sets_correlation_id(self) -> None:
        correlation_id = uuid4()

        bind_request_context(correlation_id, path="/tasks")

        context = get_contextvars()
        assert context["correlation_id"] == str(correlation_id)
        assert context["path"] == "/tasks"
        clear_request_context()

    def test_bind_replaces_previous_context(self) -> None:
        bind_request_context(uuid4(), path="/tasks")
        second = uuid4()

        bind_request_context(second)

        context = get_contextvars()
        assert context == {"correlation_id": str(second)}
        clear_request_context()

    def test_clear_request_context(self) -> None:
        bind_request_context(uuid4())

        clear_request_context()

        assert get_contextvars() == {}


class TestConfigureServiceLogging:
    """Tests for configure_service_logging."""

    def test_console_configuration_produces_bound_logger(self) -> None:
        configure_service_logging("test_service", log_level="DEBUG")

        logger = create_service_logger("unit")

        assert structlog.is_configured()
        logger.info("configured")

    def test_file_logging_creates_log_directory(self, tmp_path, monkeypatch) -> None:
        log_path = tmp_path / "nested" / "service.log"
        monkeypatch.setenv("LOG_FORMAT", "json")

        configure_service_logging(
            "test_service", log_to_file=True, log_file_path=str(log_path)
        )

        assert log_path.parent.exists()
        configure_service_logging("test_service")
        assert os.environ["SERVICE_NAME"] == "test_service"

    def test_stream_receives_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        stream = io.StringIO()

        configure_service_logging("test_service", log_to_file=False, stream=stream)
        create_service_logger("unit").warning("to the stream", attempt=1)

        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["event"] == "to the stream"
        assert line["logger_name"] == "unit"
        assert line["attempt"] == 1

    def test_logger_created_before_configuration_follows_it(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        structlog.reset_defaults()
        logger = create_service_logger("module_level")
        stream = io.StringIO()

        configure_service_logging(
            "test_service", log_level="WARNING", log_to_file=False, stream=stream
        )
        logger.info("filtered out")
        logger.error("kept")

        events = [json.loads(line)["event"] for line in stream.getvalue().splitlines()]
        assert events == ["kept"]
