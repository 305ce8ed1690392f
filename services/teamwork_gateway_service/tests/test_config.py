"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from services.teamwork_gateway_service.config import Settings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEAMWORK_URL", "API_KEY", "HOST", "PORT", "HTTP_HOST", "HTTP_PORT"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"TEAMWORK_GATEWAY_{name}", raising=False)


def test_defaults() -> None:
    config = Settings(_env_file=None)  # type: ignore[call-arg]

    assert config.HTTP_HOST == "127.0.0.1"
    assert config.HTTP_PORT == 3000
    assert config.TEAMWORK_URL is None
    assert config.static_api_key() is None


def test_bare_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAMWORK_URL", "https://acme.teamwork.com/")
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8080")

    config = Settings(_env_file=None)  # type: ignore[call-arg]

    assert config.TEAMWORK_URL == "https://acme.teamwork.com"
    assert config.static_api_key() == "secret"
    assert config.HTTP_HOST == "0.0.0.0"
    assert config.HTTP_PORT == 8080


def test_prefixed_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAMWORK_GATEWAY_TEAMWORK_URL", "https://prefixed.test")

    assert Settings(_env_file=None).TEAMWORK_URL == "https://prefixed.test"  # type: ignore[call-arg]


def test_blank_api_key_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_KEY", "")

    assert Settings(_env_file=None).static_api_key() is None  # type: ignore[call-arg]


def test_api_key_is_not_leaked_in_repr() -> None:
    config = Settings(_env_file=None, API_KEY="secret")  # type: ignore[call-arg]

    assert "secret" not in repr(config)


def test_upstream_url_joins_paths() -> None:
    config = Settings(_env_file=None, TEAMWORK_URL="https://acme.test/")  # type: ignore[call-arg]

    assert config.upstream_url("tasks.json") == "https://acme.test/tasks.json"
    assert config.upstream_url("/tasklists.json") == "https://acme.test/tasklists.json"
