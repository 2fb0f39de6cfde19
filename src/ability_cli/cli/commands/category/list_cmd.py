"""List ability categories."""

import click

from ability_cli.cli.core import build_formatter, require_registry
from ability_cli.core.categories import DEFAULT_FIELDS, category_list_record
from ability_cli.core.context import AbilityContext
from ability_cli.core.formatter import OutputFormat


@click.command("list")
@click.option("--field", default=None, help="Print the value of a single field for each category.")
@click.option("--fields", default=None, help="Comma-separated list of fields to show.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "csv", "json", "yaml", "count"]),
    default="table",
    show_default=True,
)
@click.pass_obj
def list_cmd(
    ctx: AbilityContext,
    *,
    field: str | None,
    fields: str | None,
    output_format: OutputFormat,
) -> None:
    """List all registered ability categories."""
    registry = require_registry(ctx)
    formatter = build_formatter(
        default_fields=DEFAULT_FIELDS,
        available_fields=DEFAULT_FIELDS,
        field=field,
        fields=fields,
        output_format=output_format,
        id_field="slug",
    )
    formatter.display_items([category_list_record(c) for c in registry.list_categories()])
