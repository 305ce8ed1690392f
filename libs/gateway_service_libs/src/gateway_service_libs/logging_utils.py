"""
Structured logging for gateway services and their tooling.

Loggers are structlog proxies bound to an area name. They resolve lazily, so a
module-level logger picks up whatever ``configure_service_logging`` installs
later, whether that is the service's JSON output or a CLI's stderr console.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TextIO
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor

DEFAULT_MAX_BYTES = 100 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 10


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp ``service.name`` and ``deployment.environment`` on every event."""
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


def _build_processors(use_json: bool) -> list[Processor]:
    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]
    if use_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=True)]
    return processors


def _rotating_file_handler(service_name: str, log_file_path: str | None) -> logging.Handler:
    log_file = Path(log_file_path or os.getenv("LOG_FILE_PATH", f"logs/{service_name}.log"))
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(log_file),
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(DEFAULT_MAX_BYTES))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", str(DEFAULT_BACKUP_COUNT))),
        encoding="utf-8",
    )


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
    log_to_file: bool | None = None,
    log_file_path: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Route structlog through stdlib logging for one process.

    Output is JSON when ``LOG_FORMAT=json`` or in production, console otherwise.
    ``stream`` defaults to stdout; command-line tools pass stderr so their
    stdout stays machine-readable. ``LOG_TO_FILE``, ``LOG_FILE_PATH``,
    ``LOG_MAX_BYTES`` and ``LOG_BACKUP_COUNT`` control the optional rotating
    file.
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")
    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_to_file if log_to_file is not None else _env_flag("LOG_TO_FILE"):
        handlers.append(_rotating_file_handler(service_name, log_file_path))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    structlog.configure(
        processors=_build_processors(use_json),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """Lazy logger, optionally tagged with ``logger_name``."""
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_request_context(correlation_id: UUID, **additional_context: Any) -> None:
    """Replace the per-request logging context.

    Every log line emitted while handling the request carries ``correlation_id``
    and whatever else is passed here (method, path, ...).
    """
    clear_contextvars()
    bind_contextvars(correlation_id=str(correlation_id), **additional_context)


def clear_request_context() -> None:
    """Drop the per-request logging context once the response is produced."""
    clear_contextvars()
