"""Unit tests for record schema synthesis."""

from __future__ import annotations

from typing import Any

import pytest

from services.teamwork_gateway_service.schema.synthesizer import (
    SchemaSynthesisError,
    SchemaSynthesizer,
    TypeKind,
    TypeRef,
    normalize_field_name,
    parse_sample,
    record_name_for_list_item,
    singularize,
    synthesize,
    synthesize_all,
    to_snake_case,
)


class TestNaming:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("todo-list-id", "todo_list_id"),
            ("parentTaskId", "parent_task_id"),
            ("tasklist-isTemplate", "tasklist_is_template"),
            ("DLM", "dlm"),
            ("HTTPStatus", "http_status"),
            ("comments-count", "comments_count"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_to_snake_case(self, key: str, expected: str) -> None:
        assert to_snake_case(key) == expected

    def test_synonyms_apply_after_snake_casing(self) -> None:
        assert normalize_field_name("created-on") == "created_at"
        assert normalize_field_name("last-changed-on") == "updated_at"

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("class", "class_"),
            ("json", "json_"),
            ("model-config", "model_config_"),
            ("1st", "field_1st"),
            ("float", "float_"),
            ("list", "list_"),
            ("int", "int_"),
        ],
    )
    def test_unusable_attribute_names_are_adjusted(self, key: str, expected: str) -> None:
        assert normalize_field_name(key) == expected

    def test_key_without_alphanumerics_is_rejected(self) -> None:
        with pytest.raises(SchemaSynthesisError):
            normalize_field_name("--")

    @pytest.mark.parametrize(
        ("plural", "singular"),
        [
            ("tags", "tag"),
            ("categories", "category"),
            ("boxes", "box"),
            ("todo_items", "todo_item"),
            ("status", "status"),
            ("tagged", "tagged"),
            ("statuses", "status"),
            ("aliases", "alias"),
            ("series", "series"),
            ("people", "person"),
            ("children", "child"),
        ],
    )
    def test_singularize(self, plural: str, singular: str) -> None:
        assert singularize(plural) == singular

    def test_list_item_record_name(self) -> None:
        assert record_name_for_list_item("time-entries") == "TimeEntry"

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("statuses", "Status"),
            ("aliases", "Alias"),
            ("series", "Series"),
            ("assigned-people", "AssignedPerson"),
            ("children", "Child"),
        ],
    )
    def test_irregular_plurals_name_list_items(self, key: str, expected: str) -> None:
        assert record_name_for_list_item(key) == expected


class TestTypeInference:
    def test_scalar_and_raw_types(self) -> None:
        sample: dict[str, Any] = {
            "name": "x",
            "count": 1,
            "ratio": 0.5,
            "done": False,
            "nothing": None,
            "empty": [],
            "ids": [1, 2],
        }

        (record,) = synthesize("Thing", sample)

        kinds = {field.normalized_name: field.type_ref.kind for field in record.fields}
        assert kinds == {
            "name": TypeKind.STRING,
            "count": TypeKind.INTEGER,
            "ratio": TypeKind.FLOAT,
            "done": TypeKind.BOOLEAN,
            "nothing": TypeKind.RAW_JSON,
            "empty": TypeKind.RAW_JSON,
            "ids": TypeKind.RAW_JSON,
        }
        assert all(field.optional for field in record.fields)

    def test_nested_objects_and_lists_become_records(self) -> None:
        records = synthesize(
            "Task",
            {"boardColumn": {"id": 1}, "tags": [{"id": 2, "name": "x"}], "id": 3},
        )

        assert [record.name for record in records] == ["BoardColumn", "Tag", "Task"]
        task = records[-1]
        assert task.fields[0].type_ref == TypeRef.record("BoardColumn")
        assert task.fields[1].type_ref == TypeRef.list_of(TypeRef.record("Tag"))

    def test_field_order_follows_the_sample(self) -> None:
        (record,) = synthesize("Thing", {"zeta": 1, "alpha": 2, "mid-dle": 3})

        assert record.field_names() == ["zeta", "alpha", "mid_dle"]

    def test_original_keys_are_kept(self) -> None:
        (record,) = synthesize("Thing", {"created-on": "2020-01-01"})

        assert record.fields[0].original_name == "created-on"
        assert record.fields[0].normalized_name == "created_at"


class TestNameCache:
    def test_first_shape_wins_across_resources(self) -> None:
        records = synthesize_all(
            [
                ("Task", {"tags": [{"id": 1}]}),
                ("Project", {"tags": [{"label": "x", "id": 2}]}),
            ]
        )

        tag = next(record for record in records if record.name == "Tag")
        assert tag.field_names() == ["id"]
        assert [record.name for record in records] == ["Tag", "Task", "Project"]

    def test_shared_synthesizer_returns_only_reachable_records(self) -> None:
        synthesizer = SchemaSynthesizer()
        synthesizer.synthesize("Task", {"tags": [{"id": 1}]})

        records = synthesizer.synthesize("Note", {"text": "x"})

        assert [record.name for record in records] == ["Note"]
        assert [record.name for record in synthesizer.records] == ["Tag", "Task", "Note"]

    def test_self_referencing_name_does_not_recurse(self) -> None:
        records = synthesize("Node", {"node": {"node": {"id": 1}}})

        assert [record.name for record in records] == ["Node"]
        assert records[0].fields[0].type_ref == TypeRef.record("Node")

    def test_synthesis_is_deterministic(self, task_sample: dict[str, Any]) -> None:
        assert synthesize("Task", task_sample) == synthesize("Task", task_sample)


class TestFailures:
    def test_colliding_normalized_names_are_rejected(self) -> None:
        with pytest.raises(SchemaSynthesisError, match="both normalize to 'project_id'"):
            synthesize("Thing", {"projectId": 1, "project-id": 2})

    def test_non_object_sample_is_rejected(self) -> None:
        with pytest.raises(SchemaSynthesisError):
            synthesize("Thing", [1, 2])  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]"])
    def test_parse_sample_rejects_invalid_input(self, raw: str) -> None:
        with pytest.raises(SchemaSynthesisError):
            parse_sample(raw)
