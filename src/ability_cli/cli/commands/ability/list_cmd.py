"""List registered abilities."""

import click

from ability_cli.cli.core import build_formatter, require_registry
from ability_cli.core.abilities import (
    DEFAULT_FIELDS,
    LIST_FIELDS,
    ability_list_record,
    filter_abilities,
)
from ability_cli.core.context import AbilityContext
from ability_cli.core.formatter import OutputFormat


@click.command("list")
@click.option("--category", default=None, help="Filter abilities by category slug.")
@click.option(
    "--namespace",
    default=None,
    help="Filter abilities by namespace (e.g. 'core' for 'core/*' abilities).",
)
@click.option(
    "--show-in-rest",
    "show_in_rest",
    default=None,
    help="Filter abilities by REST API exposure (true/false).",
)
@click.option("--field", default=None, help="Print the value of a single field for each ability.")
@click.option("--fields", default=None, help="Comma-separated list of fields to show.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "csv", "json", "yaml", "count", "ids"]),
    default="table",
    show_default=True,
)
@click.pass_obj
def list_cmd(
    ctx: AbilityContext,
    *,
    category: str | None,
    namespace: str | None,
    show_in_rest: str | None,
    field: str | None,
    fields: str | None,
    output_format: OutputFormat,
) -> None:
    """List all registered abilities.

    Default fields are name, label, category and description. readonly,
    destructive, idempotent and show_in_rest are available through --fields.

    \b
    Examples:
      ability list --namespace=core
      ability list --show-in-rest=true --field=name
      ability list --fields=name,readonly,destructive --format=json
    """
    registry = require_registry(ctx)
    formatter = build_formatter(
        default_fields=DEFAULT_FIELDS,
        available_fields=LIST_FIELDS,
        field=field,
        fields=fields,
        output_format=output_format,
        id_field="name",
    )

    abilities = filter_abilities(
        registry.list_abilities(),
        category=category,
        namespace=namespace,
        show_in_rest=show_in_rest,
    )
    formatter.display_items([ability_list_record(ability) for ability in abilities])
