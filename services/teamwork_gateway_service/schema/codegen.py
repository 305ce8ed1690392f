"""Render synthesized record specs as a Python module of pydantic models."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from services.teamwork_gateway_service.schema.synthesizer import (
    RecordSpec,
    TypeKind,
    TypeRef,
    load_sample,
    synthesize_all,
)

SAMPLES_DIR = Path(__file__).parent / "samples"
RECORDS_MODULE_PATH = Path(__file__).parent.parent / "models" / "records.py"

# Resource record name -> sample file. Order matters: on a record-name
# collision the resource visited first defines the shape.
RESOURCE_SAMPLES: tuple[tuple[str, str], ...] = (
    ("Task", "task.json"),
    ("TimeEntry", "time_entry.json"),
    ("TaskList", "task_list.json"),
)

MODULE_HEADER = '''"""Record models synthesized from Teamwork sample payloads.

Generated by ``teamwork-gateway-codegen generate``. Do not edit by hand.
"""

from __future__ import annotations
'''

_SCALAR_ANNOTATIONS = {
    TypeKind.STRING: "str",
    TypeKind.INTEGER: "int",
    TypeKind.FLOAT: "float",
    TypeKind.BOOLEAN: "bool",
}


def _item_annotation(type_ref: TypeRef) -> str:
    if type_ref.kind in _SCALAR_ANNOTATIONS:
        return _SCALAR_ANNOTATIONS[type_ref.kind]
    if type_ref.kind is TypeKind.RECORD:
        return str(type_ref.record_name)
    if type_ref.kind is TypeKind.LIST:
        assert type_ref.item is not None
        return f"list[{_item_annotation(type_ref.item)}]"
    return "Any"


def field_annotation(type_ref: TypeRef) -> str:
    """Annotation of an optional model field holding ``type_ref``."""
    if type_ref.kind is TypeKind.STRING:
        return "OptionalString"
    if type_ref.kind is TypeKind.RAW_JSON:
        return "Any"
    return f"{_item_annotation(type_ref)} | None"


def _holds_raw_json(type_ref: TypeRef) -> bool:
    if type_ref.kind is TypeKind.RAW_JSON:
        return True
    return type_ref.item is not None and _holds_raw_json(type_ref.item)


def render_record(spec: RecordSpec) -> str:
    lines = [f"class {spec.name}(UpstreamRecord):"]
    if not spec.fields:
        lines.append("    pass")
    for field in spec.fields:
        lines.append(
            f"    {field.normalized_name}: {field_annotation(field.type_ref)} = "
            f"Field(default=None, validation_alias={json.dumps(field.original_name)})"
        )
    return "\n".join(lines) + "\n"


def render_module(specs: Sequence[RecordSpec]) -> str:
    """Render a complete, importable module defining one model per spec."""
    uses_any = any(_holds_raw_json(field.type_ref) for spec in specs for field in spec.fields)

    parts = [MODULE_HEADER]
    imports = []
    if uses_any:
        imports.append("from typing import Any\n")
    imports.append("from pydantic import Field\n")
    imports.append(
        "from services.teamwork_gateway_service.models.base import "
        "OptionalString, UpstreamRecord\n"
    )
    parts.append("\n".join(imports))

    exported = "".join(f'    "{spec.name}",\n' for spec in specs)
    parts.append(f"__all__ = [\n{exported}]\n")

    parts.extend(f"\n{render_record(spec)}" for spec in specs)
    return "\n".join(parts)


def load_bundled_samples(samples_dir: Path = SAMPLES_DIR) -> list[tuple[str, dict]]:
    return [(name, load_sample(samples_dir / filename)) for name, filename in RESOURCE_SAMPLES]


def generate_records_source(samples_dir: Path = SAMPLES_DIR) -> str:
    """Synthesize the bundled samples and render the records module source."""
    return render_module(synthesize_all(load_bundled_samples(samples_dir)))
