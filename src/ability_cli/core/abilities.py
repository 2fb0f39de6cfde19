"""Filtering and field shaping for ability listings."""

import json
from collections.abc import Iterable
from typing import Any

from ability_cli.gateway.registry.types import ANNOTATION_NAMES, Ability

DEFAULT_FIELDS = ("name", "label", "category", "description")

# Fields `list` can show via --fields/--field beyond the defaults
LIST_FIELDS = (*DEFAULT_FIELDS, *ANNOTATION_NAMES, "show_in_rest")

GET_FIELDS = (
    *DEFAULT_FIELDS,
    "input_schema",
    "output_schema",
    *ANNOTATION_NAMES,
    "show_in_rest",
)

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})

AbilityRecord = dict[str, str | None]


def parse_loose_bool(value: str) -> bool | None:
    """Parse "true"/"1"/"yes"/"on" and "false"/"0"/"no"/"off" (any case).

    Returns None for anything else.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    return None


def format_annotation(value: bool | None) -> str:
    """Render a tri-state annotation: "1", "0", or "" when undeclared."""
    if value is None:
        return ""
    return "1" if value else "0"


def format_flag(value: bool) -> str:
    return "1" if value else "0"


def encode_json(value: Any) -> str:
    """Compact JSON, as the host itself serializes schemas."""
    return json.dumps(value, separators=(",", ":"))


def ability_list_record(ability: Ability) -> AbilityRecord:
    """Shape an ability into the record used by `ability list`."""
    record: AbilityRecord = {
        "name": ability.name,
        "label": ability.label,
        "category": ability.category,
        "description": ability.description,
    }
    for annotation in ANNOTATION_NAMES:
        record[annotation] = format_annotation(ability.annotation(annotation))
    record["show_in_rest"] = format_flag(ability.show_in_rest)
    return record


def ability_get_record(ability: Ability) -> AbilityRecord:
    """Shape an ability into the record used by `ability get` (adds both schemas)."""
    list_record = ability_list_record(ability)
    record: AbilityRecord = {field: list_record[field] for field in DEFAULT_FIELDS}
    record["input_schema"] = encode_json(ability.input_schema)
    record["output_schema"] = encode_json(ability.output_schema)
    for field in (*ANNOTATION_NAMES, "show_in_rest"):
        record[field] = list_record[field]
    return record


def filter_abilities(
    abilities: Iterable[Ability],
    *,
    category: str | None,
    namespace: str | None,
    show_in_rest: str | None,
) -> list[Ability]:
    """Keep abilities matching every given filter, preserving registry order.

    Args:
        abilities: Abilities in registry order
        category: Exact category slug to match
        namespace: Exact namespace (segment before the first "/") to match
        show_in_rest: Loose boolean string. Unparseable values do not filter.
    """
    rest_exposure = parse_loose_bool(show_in_rest) if show_in_rest is not None else None

    matched: list[Ability] = []
    for ability in abilities:
        if category is not None and ability.category != category:
            continue
        if namespace is not None and ability.namespace != namespace:
            continue
        if rest_exposure is not None and ability.show_in_rest != rest_exposure:
            continue
        matched.append(ability)
    return matched
