"""Record and envelope models for the Teamwork gateway."""

from services.teamwork_gateway_service.models.base import OptionalString, UpstreamRecord
from services.teamwork_gateway_service.models.envelope import (
    ErrorBody,
    ErrorEnvelope,
    LinkSet,
    NormalizedResponse,
    PageMeta,
)
from services.teamwork_gateway_service.models.records import Task, TaskList, TimeEntry

__all__ = [
    "ErrorBody",
    "ErrorEnvelope",
    "LinkSet",
    "NormalizedResponse",
    "OptionalString",
    "PageMeta",
    "Task",
    "TaskList",
    "TimeEntry",
    "UpstreamRecord",
]
