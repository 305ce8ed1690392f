"""Normalized response envelope returned for every resource."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from services.teamwork_gateway_service.models.base import UpstreamRecord

RecordT = TypeVar("RecordT", bound=UpstreamRecord)


class PageMeta(BaseModel):
    """Pagination metadata taken from the upstream's X-Page/X-Pages headers."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: PositiveInt
    total_pages: PositiveInt = Field(serialization_alias="totalPages")


class LinkSet(BaseModel):
    """Absolute URLs of the related pages of a list response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first: str
    last: str
    next: str | None = None
    prev: str | None = None
    curr: str = Field(serialization_alias="self")


class NormalizedResponse(BaseModel, Generic[RecordT]):
    """``{data, meta, links}``: the only success shape clients ever see."""

    data: list[RecordT]
    meta: PageMeta
    links: LinkSet

    def to_json_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ErrorBody(BaseModel):
    code: int
    message: str
    teamwork_response: Any = None


class ErrorEnvelope(BaseModel):
    """``{"error": {...}}`` body of every failed request."""

    error: ErrorBody
