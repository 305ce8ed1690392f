"""Base classes and field types shared by the generated record models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _empty_string_as_none(value: Any) -> Any:
    # Teamwork sends "" for unset text fields.
    if value == "":
        return None
    return value


OptionalString = Annotated[str | None, BeforeValidator(_empty_string_as_none)]


class UpstreamRecord(BaseModel):
    """Base for every record decoded from an upstream list response.

    Fields are read by their provider key (or their normalized name) and always
    serialized under the normalized name. Keys the sample did not show are
    ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )
