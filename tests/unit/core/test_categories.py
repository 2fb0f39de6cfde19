"""Tests for category field shaping."""

import json

from ability_cli.core.categories import GET_FIELDS, category_get_record, category_list_record
from tests.test_utils.builders import make_category


def test_list_record_fields() -> None:
    record = category_list_record(make_category("site", label="Site", description="Site info"))

    assert record == {"slug": "site", "label": "Site", "description": "Site info"}


def test_get_record_without_meta_is_empty_object() -> None:
    record = category_get_record(make_category("site"))

    assert list(record) == list(GET_FIELDS)
    assert record["meta"] == "{}"


def test_get_record_serializes_meta() -> None:
    record = category_get_record(make_category("site", meta={"priority": 1, "tags": ["a"]}))

    assert json.loads(record["meta"]) == {"priority": 1, "tags": ["a"]}
