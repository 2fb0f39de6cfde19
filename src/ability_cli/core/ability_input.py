"""Build the input payload passed to an ability from command-line flags.

Two modes exist:
- build_input(): used by `validate` and `can-run`. An empty payload becomes None, so a
  host can tell "no input given" apart from "input is an empty object".
- build_input_with_stdin(): used by `run`. `--input=-` reads the JSON document from
  stdin, and an empty payload stays an empty dict.

Field flags (`--<field>=<value>`) are merged over the JSON document as raw values;
type coercion is left to the host's schema validation.
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

from ability_cli.gateway.registry.types import AbilityInput

RESERVED_FLAGS = frozenset({"input", "format"})

INVALID_JSON_MESSAGE = "Invalid JSON provided for --input."
STDIN_READ_FAILED_MESSAGE = "Failed to read from stdin."

FieldValue = str | bool


class AbilityInputError(Exception):
    """The --input document or stdin could not be turned into a payload."""


def _decode(raw: str) -> Any:
    """Decode JSON, returning None on malformed input."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def _merge_fields(
    payload: dict[str, Any] | list[Any], fields: Mapping[str, FieldValue]
) -> dict[str, Any] | list[Any]:
    """Merge field flags over the decoded document, later keys winning."""
    extra = {key: value for key, value in fields.items() if key not in RESERVED_FLAGS}
    if not extra:
        return payload
    # A JSON array merged with named fields is keyed by position.
    if isinstance(payload, list):
        merged: dict[str, Any] = {str(index): item for index, item in enumerate(payload)}
    else:
        merged = dict(payload)
    merged.update(extra)
    return merged


def build_input(json_input: str | None, fields: Mapping[str, FieldValue]) -> AbilityInput:
    """Build the payload for validate/can-run.

    Args:
        json_input: Raw value of --input, None when the flag was not given
        fields: Field flags in command-line order

    Returns:
        The payload, or None when neither --input nor any field flag supplied data

    Raises:
        AbilityInputError: If a non-empty --input is not a JSON object or array
    """
    payload: dict[str, Any] | list[Any] = {}
    if json_input is not None:
        decoded = _decode(json_input)
        is_document = isinstance(decoded, (dict, list))
        if not is_document and json_input != "":
            raise AbilityInputError(INVALID_JSON_MESSAGE)
        if is_document:
            payload = decoded

    payload = _merge_fields(payload, fields)
    if not payload:
        return None
    return payload


def build_input_with_stdin(
    json_input: str | None,
    fields: Mapping[str, FieldValue],
    *,
    read_stdin: Callable[[], str],
) -> dict[str, Any] | list[Any]:
    """Build the payload for run, reading the JSON document from stdin for `--input=-`.

    Blocks until stdin reaches end-of-stream.

    Raises:
        AbilityInputError: If stdin cannot be read or a non-empty document is not a
            JSON object or array
    """
    if json_input == "-":
        try:
            json_input = read_stdin().strip()
        except (OSError, UnicodeDecodeError) as e:
            raise AbilityInputError(STDIN_READ_FAILED_MESSAGE) from e

    payload: dict[str, Any] | list[Any] = {}
    if json_input:
        decoded = _decode(json_input)
        if not isinstance(decoded, (dict, list)):
            raise AbilityInputError(INVALID_JSON_MESSAGE)
        payload = decoded

    return _merge_fields(payload, fields)
