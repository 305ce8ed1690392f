"""
Error codes and the canonical error data model for gateway services.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    MISSING_REQUIRED_HEADER = "MISSING_REQUIRED_HEADER"
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    PARSING_ERROR = "PARSING_ERROR"


class ErrorDetail(BaseModel):
    """
    The canonical, pure data model for an error raised inside a gateway service.
    This model contains only data fields and no behavior.
    """

    error_code: ErrorCode
    message: str
    correlation_id: UUID
    timestamp: datetime
    service: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
