"""Data types for ability registry operations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

AbilityInput = dict[str, Any] | list[Any] | None

ANNOTATION_NAMES = ("readonly", "destructive", "idempotent")


def freeze_meta(meta: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Copy a host meta map into a read-only mapping (empty when absent)."""
    if not meta:
        return MappingProxyType({})
    return MappingProxyType(dict(meta))


@dataclass(frozen=True)
class Ability:
    """An ability as registered with the host.

    Attributes:
        name: Two-segment name, e.g. "core/get-site-info"
        label: Human readable label
        category: Category slug, None if the host did not assign one
        description: Free-form description
        input_schema: JSON-schema-shaped value describing accepted input (opaque)
        output_schema: JSON-schema-shaped value describing the result (opaque)
        meta: Open key-value map; only a few well-known keys are read
    """

    name: str
    label: str
    category: str | None
    description: str
    input_schema: Any = None
    output_schema: Any = None
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def namespace(self) -> str:
        """Segment before the first "/", empty when the name has no separator."""
        namespace, sep, _ = self.name.partition("/")
        if not sep:
            return ""
        return namespace

    def meta_flag(self, key: str) -> bool:
        """Truthiness of a meta entry, False when absent."""
        return bool(self.meta.get(key, False))

    def annotation(self, key: str) -> bool | None:
        """Read one of the boolean annotations.

        Returns None when the host did not declare the annotation or declared it
        with a non-boolean value.
        """
        annotations = self.meta.get("annotations")
        if not isinstance(annotations, Mapping):
            return None
        value = annotations.get(key)
        if not isinstance(value, bool):
            return None
        return value

    @property
    def show_in_rest(self) -> bool:
        return self.meta_flag("show_in_rest")


@dataclass(frozen=True)
class AbilityCategory:
    """A named grouping of abilities."""

    slug: str
    label: str
    description: str
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class AbilityFailure:
    """Failure reported by the host for execute, validate or permission calls."""

    message: str


class AbilityHostError(Exception):
    """Raised by host implementations to report a failed ability operation.

    The production registry converts it into an AbilityFailure, so commands
    never handle host exceptions directly.
    """
