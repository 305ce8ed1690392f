"""Shared service utilities for the Teamwork gateway: logging, settings and errors."""

from gateway_service_libs.config import Environment, ServiceSettings
from gateway_service_libs.logging_utils import configure_service_logging, create_service_logger

__all__ = [
    "Environment",
    "ServiceSettings",
    "configure_service_logging",
    "create_service_logger",
]
