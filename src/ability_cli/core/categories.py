"""Field shaping for ability categories."""

from ability_cli.core.abilities import encode_json
from ability_cli.gateway.registry.types import AbilityCategory

DEFAULT_FIELDS = ("slug", "label", "description")
GET_FIELDS = (*DEFAULT_FIELDS, "meta")

CategoryRecord = dict[str, str]


def category_list_record(category: AbilityCategory) -> CategoryRecord:
    return {
        "slug": category.slug,
        "label": category.label,
        "description": category.description,
    }


def category_get_record(category: AbilityCategory) -> CategoryRecord:
    """Record for `ability category get`; meta is "{}" when the host declared none."""
    record = category_list_record(category)
    record["meta"] = encode_json(dict(category.meta)) if category.meta else "{}"
    return record
