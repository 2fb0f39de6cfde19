"""Shared command plumbing: registry access behind the host version gate, output setup."""

import re
from collections.abc import Sequence

from ability_cli.cli.ensure import Ensure
from ability_cli.core.context import AbilityContext, HostUnavailable
from ability_cli.core.formatter import FieldSelectionError, Formatter, OutputFormat
from ability_cli.gateway.registry.abc import AbilityRegistry


def version_tuple(version: str) -> tuple[int, ...]:
    """Numeric components of a dotted version ("6.9.1-RC1" -> (6, 9, 1)).

    A component without leading digits ends the version.
    """
    parts: list[int] = []
    for component in version.strip().split("."):
        match = re.match(r"\d+", component)
        if match is None:
            break
        parts.append(int(match.group()))
    return tuple(parts)


def is_version_at_least(version: str, minimum: str) -> bool:
    current = version_tuple(version)
    required = version_tuple(minimum)
    width = max(len(current), len(required))
    return current + (0,) * (width - len(current)) >= required + (0,) * (width - len(required))


def require_registry(ctx: AbilityContext) -> AbilityRegistry:
    """Return the registry, failing if the host is unavailable or too old."""
    if isinstance(ctx.registry, HostUnavailable):
        Ensure.fail(ctx.registry.message)

    registry = ctx.registry
    minimum = ctx.config.min_host_version
    if not is_version_at_least(registry.host_version(), minimum):
        Ensure.fail(f"Requires host version {minimum} or greater.")
    return registry


def build_formatter(
    *,
    default_fields: Sequence[str],
    available_fields: Sequence[str],
    field: str | None,
    fields: str | None,
    output_format: OutputFormat,
    id_field: str,
) -> Formatter:
    """Formatter.from_options(), exiting with an error on an unknown field."""
    try:
        return Formatter.from_options(
            default_fields=default_fields,
            available_fields=available_fields,
            field=field,
            fields=fields,
            output_format=output_format,
            id_field=id_field,
        )
    except FieldSelectionError as e:
        Ensure.fail(str(e))
