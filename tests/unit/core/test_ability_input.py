"""Tests for building ability input from --input and field flags."""

import pytest

from ability_cli.core.ability_input import (
    INVALID_JSON_MESSAGE,
    STDIN_READ_FAILED_MESSAGE,
    AbilityInputError,
    build_input,
    build_input_with_stdin,
)


def _no_stdin() -> str:
    raise AssertionError("stdin should not be read")


def _failing_stdin() -> str:
    raise OSError("closed")


# build_input (validate / can-run)


def test_build_input_without_any_input_is_absent() -> None:
    assert build_input(None, {}) is None


def test_build_input_empty_object_is_absent() -> None:
    assert build_input("{}", {}) is None


def test_build_input_empty_string_is_absent() -> None:
    assert build_input("", {}) is None


def test_build_input_decodes_json_object() -> None:
    assert build_input('{"fields": ["name", "version"]}', {}) == {"fields": ["name", "version"]}


def test_build_input_field_flags_become_payload() -> None:
    assert build_input(None, {"name": "test"}) == {"name": "test"}


def test_build_input_field_merged_into_empty_object_is_present() -> None:
    assert build_input("{}", {"count": "5"}) == {"count": "5"}


def test_build_input_field_flags_override_json_keys() -> None:
    result = build_input('{"name": "json", "keep": 1}', {"name": "flag"})

    assert result == {"name": "flag", "keep": 1}


def test_build_input_ignores_reserved_flags() -> None:
    assert build_input(None, {"format": "json", "input": "x"}) is None


def test_build_input_keeps_values_as_strings() -> None:
    assert build_input(None, {"count": "5", "enabled": "true"}) == {
        "count": "5",
        "enabled": "true",
    }


def test_build_input_json_array_is_kept() -> None:
    assert build_input("[1, 2]", {}) == [1, 2]


def test_build_input_json_array_with_fields_is_keyed_by_position() -> None:
    assert build_input('["a"]', {"name": "b"}) == {"0": "a", "name": "b"}


@pytest.mark.parametrize("raw", ["invalid json", "5", '"text"', "null", "true", " "])
def test_build_input_rejects_non_document_json(raw: str) -> None:
    with pytest.raises(AbilityInputError, match=INVALID_JSON_MESSAGE):
        build_input(raw, {})


# build_input_with_stdin (run)


def test_stdin_mode_without_input_is_empty_dict() -> None:
    assert build_input_with_stdin(None, {}, read_stdin=_no_stdin) == {}


def test_stdin_mode_empty_string_is_empty_dict() -> None:
    assert build_input_with_stdin("", {}, read_stdin=_no_stdin) == {}


def test_stdin_mode_empty_object_stays_empty_dict() -> None:
    assert build_input_with_stdin("{}", {}, read_stdin=_no_stdin) == {}


def test_stdin_mode_reads_and_trims_stdin() -> None:
    result = build_input_with_stdin("-", {}, read_stdin=lambda: '\n  {"name": "World"}  \n')

    assert result == {"name": "World"}


def test_stdin_mode_blank_stdin_is_empty_dict() -> None:
    assert build_input_with_stdin("-", {}, read_stdin=lambda: "   \n") == {}


def test_stdin_mode_merges_fields_over_stdin_document() -> None:
    result = build_input_with_stdin(
        "-", {"name": "flag"}, read_stdin=lambda: '{"name": "stdin", "n": 2}'
    )

    assert result == {"name": "flag", "n": 2}


def test_stdin_mode_read_failure() -> None:
    with pytest.raises(AbilityInputError, match=STDIN_READ_FAILED_MESSAGE):
        build_input_with_stdin("-", {}, read_stdin=_failing_stdin)


@pytest.mark.parametrize("raw", ["invalid json", "42", "null"])
def test_stdin_mode_rejects_non_document_json(raw: str) -> None:
    with pytest.raises(AbilityInputError, match=INVALID_JSON_MESSAGE):
        build_input_with_stdin(raw, {}, read_stdin=_no_stdin)


def test_stdin_mode_rejects_invalid_json_from_stdin() -> None:
    with pytest.raises(AbilityInputError, match=INVALID_JSON_MESSAGE):
        build_input_with_stdin("-", {}, read_stdin=lambda: "not json")
