"""Record schema synthesis from sample upstream payloads.

Teamwork's list endpoints return items whose keys mix kebab-case, camelCase
and shouting acronyms (``todo-list-id``, ``parentTaskId``, ``DLM``) and whose
fields are omitted or nulled inconsistently. Given one representative JSON
object per resource, the synthesizer derives a closed set of ``RecordSpec``
definitions with normalized, snake_case field names, an inferred type for every
field, and the original provider key kept alongside for decoding.

The synthesizer is deterministic: the same samples, visited in the same order,
always produce the same specs. Record names are cached by name, not by shape:
the first record generated for a derived name is reused for every later field
that derives the same name, even when that later sample has a different shape.

Normalized names are also the names clients see. A key that would clash with a
Python keyword, a pydantic model attribute or a name the generated module
imports (``class``, ``schema``, ``float``) keeps its trailing underscore on the
wire as ``class_``, ``schema_``, ``float_``.
"""

from __future__ import annotations

import json
import keyword
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import inflection
from gateway_service_libs.logging_utils import create_service_logger

logger = create_service_logger("teamwork_gateway.schema.synthesizer")

FIELD_SYNONYMS: Mapping[str, str] = {
    "created_on": "created_at",
    "last_changed_on": "updated_at",
}

# Names a pydantic model field must not take.
RESERVED_FIELD_NAMES = frozenset(
    {
        "construct",
        "copy",
        "dict",
        "fields",
        "from_orm",
        "json",
        "parse_file",
        "parse_obj",
        "parse_raw",
        "schema",
        "schema_json",
        "update_forward_refs",
        "validate",
    }
)

# Names the generated module binds at import time.
GENERATED_MODULE_NAMES = frozenset(
    {"Any", "Field", "OptionalString", "UpstreamRecord", "bool", "float", "int", "list", "str"}
)

_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


class SchemaSynthesisError(ValueError):
    """Raised when a sample payload cannot be turned into record specs."""


class TypeKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    RECORD = "record"
    LIST = "list"
    RAW_JSON = "raw_json"


@dataclass(frozen=True)
class TypeRef:
    """Inferred type of a field.

    ``record_name`` is set for ``RECORD``; ``item`` is set for ``LIST``.
    """

    kind: TypeKind
    record_name: str | None = None
    item: TypeRef | None = None

    @classmethod
    def string(cls) -> TypeRef:
        return cls(TypeKind.STRING)

    @classmethod
    def integer(cls) -> TypeRef:
        return cls(TypeKind.INTEGER)

    @classmethod
    def float_(cls) -> TypeRef:
        return cls(TypeKind.FLOAT)

    @classmethod
    def boolean(cls) -> TypeRef:
        return cls(TypeKind.BOOLEAN)

    @classmethod
    def raw_json(cls) -> TypeRef:
        return cls(TypeKind.RAW_JSON)

    @classmethod
    def record(cls, name: str) -> TypeRef:
        return cls(TypeKind.RECORD, record_name=name)

    @classmethod
    def list_of(cls, item: TypeRef) -> TypeRef:
        return cls(TypeKind.LIST, item=item)

    def referenced_records(self) -> Iterable[str]:
        if self.record_name is not None:
            yield self.record_name
        if self.item is not None:
            yield from self.item.referenced_records()


@dataclass(frozen=True)
class FieldSpec:
    original_name: str
    normalized_name: str
    type_ref: TypeRef
    optional: bool = True


@dataclass(frozen=True)
class RecordSpec:
    name: str
    fields: tuple[FieldSpec, ...]

    def field_names(self) -> list[str]:
        return [field.normalized_name for field in self.fields]


def to_snake_case(key: str) -> str:
    """Convert a provider key (camelCase, kebab-case, ACRONYM) to snake_case."""
    return _SEPARATORS.sub("_", inflection.underscore(key)).strip("_").lower()


def to_pascal_case(key: str) -> str:
    return inflection.camelize(to_snake_case(key))


def singularize(word: str) -> str:
    """Singular form of the last word of a snake_case name (``todo_items`` to ``todo_item``)."""
    return inflection.singularize(word)


def normalize_field_name(original_name: str) -> str:
    """Deterministic in-process name for a provider key.

    Snake-cases the key, applies the synonym table, then makes the result a
    usable model attribute.
    """
    name = to_snake_case(original_name)
    if not name:
        raise SchemaSynthesisError(
            f"Field name {original_name!r} has no alphanumeric characters"
        )
    name = FIELD_SYNONYMS.get(name, name)
    if name[0].isdigit():
        name = f"field_{name}"
    if (
        keyword.iskeyword(name)
        or name in RESERVED_FIELD_NAMES
        or name in GENERATED_MODULE_NAMES
        or name.startswith("model_")
    ):
        name = f"{name}_"
    return name


def record_name_for_object(field_name: str) -> str:
    return to_pascal_case(field_name)


def record_name_for_list_item(field_name: str) -> str:
    return to_pascal_case(singularize(to_snake_case(field_name)))


class SchemaSynthesizer:
    """Builds record specs, sharing one name cache across every resource it visits."""

    def __init__(self) -> None:
        self._records: dict[str, RecordSpec] = {}
        self._in_progress: set[str] = set()
        self._order: list[str] = []

    @property
    def records(self) -> list[RecordSpec]:
        """Every record generated so far, dependencies before dependents."""
        return [self._records[name] for name in self._order]

    def synthesize(self, resource_name: str, sample: Mapping[str, Any]) -> list[RecordSpec]:
        """Synthesize the records reachable from one resource sample.

        Returns the resource's record and every record it references,
        dependencies first. Records already known to this synthesizer are
        reused by name.
        """
        if not isinstance(sample, Mapping):
            raise SchemaSynthesisError(
                f"Sample for {resource_name!r} must be a JSON object, got {type(sample).__name__}"
            )

        root_name = to_pascal_case(resource_name)
        if not root_name:
            raise SchemaSynthesisError(f"Resource name {resource_name!r} is not usable")

        self._build_record(root_name, sample)
        reachable = self._reachable_from(root_name)
        records = [self._records[name] for name in self._order if name in reachable]

        logger.debug(
            "Synthesized records for resource",
            resource=resource_name,
            records=[record.name for record in records],
        )
        return records

    def _build_record(self, name: str, obj: Mapping[str, Any]) -> None:
        if name in self._records or name in self._in_progress:
            return

        self._in_progress.add(name)
        fields: list[FieldSpec] = []
        seen: dict[str, str] = {}
        for original_name, value in obj.items():
            normalized = normalize_field_name(original_name)
            if normalized in seen:
                raise SchemaSynthesisError(
                    f"Record {name!r}: keys {seen[normalized]!r} and {original_name!r} "
                    f"both normalize to {normalized!r}"
                )
            seen[normalized] = original_name
            fields.append(
                FieldSpec(
                    original_name=original_name,
                    normalized_name=normalized,
                    type_ref=self._infer_type(original_name, value),
                )
            )
        self._in_progress.discard(name)

        self._records[name] = RecordSpec(name=name, fields=tuple(fields))
        self._order.append(name)

    def _infer_type(self, field_name: str, value: Any) -> TypeRef:
        if isinstance(value, str):
            return TypeRef.string()
        if isinstance(value, bool):
            return TypeRef.boolean()
        if isinstance(value, int):
            return TypeRef.integer()
        if isinstance(value, float):
            return TypeRef.float_()
        if isinstance(value, Mapping):
            record_name = record_name_for_object(field_name)
            self._build_record(record_name, value)
            return TypeRef.record(record_name)
        if isinstance(value, list) and value and isinstance(value[0], Mapping):
            record_name = record_name_for_list_item(field_name)
            self._build_record(record_name, value[0])
            return TypeRef.list_of(TypeRef.record(record_name))
        # Empty arrays, arrays of scalars and nulls carry no usable shape.
        return TypeRef.raw_json()

    def _reachable_from(self, root_name: str) -> set[str]:
        reachable: set[str] = set()
        pending = [root_name]
        while pending:
            name = pending.pop()
            if name in reachable:
                continue
            reachable.add(name)
            for field in self._records[name].fields:
                pending.extend(field.type_ref.referenced_records())
        return reachable


def synthesize(resource_name: str, sample: Mapping[str, Any]) -> list[RecordSpec]:
    """Synthesize one resource's records with a fresh name cache."""
    return SchemaSynthesizer().synthesize(resource_name, sample)


def synthesize_all(samples: Iterable[tuple[str, Mapping[str, Any]]]) -> list[RecordSpec]:
    """Synthesize several resources in order, sharing one name cache."""
    synthesizer = SchemaSynthesizer()
    for resource_name, sample in samples:
        synthesizer.synthesize(resource_name, sample)
    return synthesizer.records


def parse_sample(raw: str, source: str = "<sample>") -> dict[str, Any]:
    """Parse sample JSON text, failing on anything but a JSON object."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SchemaSynthesisError(f"{source}: invalid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise SchemaSynthesisError(
            f"{source}: expected a JSON object, got {type(value).__name__}"
        )
    return value


def load_sample(path: Path) -> dict[str, Any]:
    return parse_sample(path.read_text(encoding="utf-8"), source=str(path))
