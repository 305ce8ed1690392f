"""Public list routes proxied to Teamwork.

Each entry binds a public path to an upstream endpoint, the key of the array in
Teamwork's response body, and the record model used to decode its items.
"""

from __future__ import annotations

from fastapi import APIRouter

from services.teamwork_gateway_service.models.base import UpstreamRecord
from services.teamwork_gateway_service.models.envelope import ErrorEnvelope, NormalizedResponse
from services.teamwork_gateway_service.models.records import Task, TaskList, TimeEntry
from services.teamwork_gateway_service.routing import bind_route

RESOURCE_ROUTES: tuple[tuple[str, type[UpstreamRecord], str, str], ...] = (
    ("/tasks", Task, "tasks.json", "todo-items"),
    ("/time-entries", TimeEntry, "time_entries.json", "time-entries"),
    ("/task-lists", TaskList, "tasklists.json", "tasklists"),
)

router = APIRouter(tags=["Resources"])

for path, record_type, upstream_path, envelope_key in RESOURCE_ROUTES:
    router.add_api_route(
        path,
        bind_route(record_type, upstream_path, envelope_key),
        methods=["GET"],
        response_model=None,
        summary=f"List {record_type.__name__} records",
        responses={
            200: {"model": NormalizedResponse[record_type]},  # type: ignore[valid-type]
            400: {"model": ErrorEnvelope},
            500: {"model": ErrorEnvelope},
        },
    )
