"""Tests for `ability get`."""

import json

from ability_cli.gateway.registry.fake import FakeAbilityRegistry
from tests.test_utils.builders import invoke, make_ability

INPUT_SCHEMA = {"type": "object", "properties": {"fields": {"type": "array"}}}


def _registry() -> FakeAbilityRegistry:
    return FakeAbilityRegistry(
        abilities=[
            make_ability(
                "core/get-site-info",
                label="Get Site Information",
                description="Returns site information.",
                input_schema=INPUT_SCHEMA,
                meta={
                    "show_in_rest": True,
                    "annotations": {"readonly": True, "destructive": False},
                },
            )
        ]
    )


def test_get_json_includes_all_fields() -> None:
    result = invoke(_registry(), ["get", "core/get-site-info", "--format=json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["name"] == "core/get-site-info"
    assert json.loads(data["input_schema"]) == INPUT_SCHEMA
    assert data["output_schema"] == "null"
    assert data["readonly"] == "1"
    assert data["destructive"] == "0"
    assert data["idempotent"] == ""
    assert data["show_in_rest"] == "1"


def test_get_single_field() -> None:
    result = invoke(_registry(), ["get", "core/get-site-info", "--field=label"])

    assert result.exit_code == 0, result.output
    assert result.output == "Get Site Information\n"


def test_get_fields_subset_table() -> None:
    result = invoke(
        _registry(), ["get", "core/get-site-info", "--fields=name,category,readonly"]
    )

    assert result.exit_code == 0, result.output
    assert "Field" in result.output
    assert "category" in result.output
    assert "description" not in result.output


def test_get_not_found() -> None:
    result = invoke(_registry(), ["get", "core/missing"])

    assert result.exit_code == 1
    assert "Error: Ability 'core/missing' not found." in result.output
