"""Core exception carrying an ErrorDetail."""

from __future__ import annotations

from typing import Any

from gateway_service_libs.error_handling.error_models import ErrorDetail


class GatewayError(Exception):
    """Exception raised for every failure a gateway service reports.

    The structured ``ErrorDetail`` travels with the exception unchanged from the
    place it was raised to the application's error handlers.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    @property
    def details(self) -> dict[str, Any]:
        return self.error_detail.details

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.error_detail.message}"

    def __repr__(self) -> str:
        return (
            f"GatewayError(error_code={self.error_code!r}, "
            f"message={self.error_detail.message!r}, "
            f"correlation_id={self.correlation_id!r})"
        )
